"""Replace typographic quotes (as pasted from Word) with straight quotes.

Each change event fixes the first occurrence of each of the four curly
quotes. Typing keeps firing events, so the rest of the document is
cleaned up progressively.
"""

import logging
import re

from docsmarkdown.framework.editor import Range, Replacement, is_markdown

log = logging.getLogger("docsmarkdown.markdown")

LEFT_DOUBLE = re.compile("\u201c")   # “
RIGHT_DOUBLE = re.compile("\u201d")  # ”
LEFT_SINGLE = re.compile("\u2018")   # ‘
RIGHT_SINGLE = re.compile("\u2019")  # ’

SMART_QUOTE_TO_STANDARD = (
    (LEFT_DOUBLE, '"'),
    (RIGHT_DOUBLE, '"'),
    (LEFT_SINGLE, "'"),
    (RIGHT_SINGLE, "'"),
)


def find_replacement(document, content, value, expression=None):
    """Locate the first match of *expression* in *content*.

    Positions are computed by *document* from offsets into *content*,
    which must be the document's text at the time of the call.

    Returns:
        Replacement or None.
    """
    match = expression.search(content) if expression is not None else None
    if match is None or not match.group(0):
        return None
    start = document.position_at(match.start())
    end = document.position_at(match.end())
    return Replacement(Range(start, end), value)


def apply_replacements(replacements, editor):
    """Apply every replacement in one edit."""
    if not replacements:
        return False
    return editor.edit(replacements)


def replace_smart_quotes(event, editor, enabled):
    """Straighten curly quotes in the document that changed.

    Args:
        event:   Change notification; only ``event.document`` is used.
        editor:  The active TextEditor (may be None).
        enabled: Value of the ``markdown.replace_smart_quotes`` setting.

    Returns:
        The event, unchanged.
    """
    if not enabled:
        return event

    document = getattr(event, "document", None) if event is not None else None
    if document is None:
        return event
    if editor is None or not is_markdown(editor.document):
        return event

    content = document.get_text()
    if not content:
        return event

    replacements = []
    for expression, value in SMART_QUOTE_TO_STANDARD:
        replacement = find_replacement(document, content, value, expression)
        if replacement:
            replacements.append(replacement)

    if replacements:
        log.debug("Replacing %d smart quote(s) in %s",
                  len(replacements), document.file_name)
        apply_replacements(replacements, editor)
    return event
