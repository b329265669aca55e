"""Markdown table insertion: "C:R" input validation and table text."""

import logging
import math
import re

log = logging.getLogger("docsmarkdown.markdown")

MAX_COLUMNS = 4
MAX_ROWS = 50

MSG_SYNTAX = "Please input the number of columns and rows as C:R e.g. 3:4"
MSG_NON_POSITIVE = "The number of rows or columns can't be zero or negative."
MSG_TOO_MANY_COLUMNS = "You can only insert up to four columns via Docs Markdown."
MSG_TOO_MANY_ROWS = "You can only insert up to 50 rows via Docs Markdown."

_COUNT_RE = re.compile(r"-?[0-9]*")

_CELL = "         "
_RULE = "---------"


def _parse_count(value):
    """Parse one field of "C:R".

    Returns None when the field is not integer-like at all, NaN when it
    is integer-like but empty (``""`` or ``"-"``), else the int.
    """
    if value is None:
        return None
    text = str(value)
    if not _COUNT_RE.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        return math.nan


def _is_nan(value):
    return isinstance(value, float) and math.isnan(value)


def validate_table_row_and_column_count(size, col_str, row_str, warn=None):
    """Check the user's "C:R" request.

    Args:
        size:    Number of parts the input split into on ':'.
        col_str: Requested columns.
        row_str: Requested rows.
        warn:    Callable receiving the user-facing message when the
                 request is rejected.

    Returns:
        True if a table can be built, False if the request breaks a rule
        (a warning has been posted), None if a field is not a number.
    """
    col = _parse_count(col_str)
    row = _parse_count(row_str)
    log.debug("Trying to create a table of: %s columns and %s rows.", col, row)

    if col is None or row is None:
        return None

    if size != 2 or _is_nan(col) or _is_nan(row):
        message = MSG_SYNTAX
    elif col <= 0 or row <= 0:
        message = MSG_NON_POSITIVE
    elif col > MAX_COLUMNS:
        message = MSG_TOO_MANY_COLUMNS
    elif row > MAX_ROWS:
        message = MSG_TOO_MANY_ROWS
    else:
        return True

    log.warning(message)
    if warn is not None:
        warn(message)
    return False


def table_builder(col, row):
    """Return a Markdown table with *col* columns and *row* body rows.

    Starts with a newline so the table never joins the text before the
    cursor.
    """
    lines = [
        "|" + "".join("Column%d  |" % c for c in range(1, col + 1)),
        "|" + (_RULE + "|") * col,
    ]
    for r in range(1, row + 1):
        lines.append("|" + "Row%d     |" % r + (_CELL + "|") * (col - 1))

    table = "\n" + "".join(line + "\n" for line in lines)
    log.debug("Table created: \r\n%s", table)
    return table
