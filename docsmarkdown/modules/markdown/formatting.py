"""Inline emphasis toggles."""

import logging

from docsmarkdown.framework.editor import Replacement

log = logging.getLogger("docsmarkdown.markdown")


def _wrapped(text, marker):
    n = len(marker)
    return len(text) >= 2 * n and text.startswith(marker) and text.endswith(marker)


def format_italic_text(text):
    """Toggle single-asterisk emphasis on *text*.

    ``""`` gives ``"**"`` (an empty emphasis to type into), ``*x*`` loses
    its asterisks, ``***x***`` drops back to bold, bold and plain text
    get wrapped.
    """
    if not text:
        return "**"
    if _wrapped(text, "***"):
        return text[1:-1]
    if _wrapped(text, "**"):
        return "*" + text + "*"
    if _wrapped(text, "*"):
        return text[1:-1]
    return "*" + text + "*"


def italic_replacements(editor):
    """One Replacement per selection, all read from the same snapshot."""
    document = editor.document
    content = document.get_text()
    replacements = []
    for selection in editor.selections:
        start = document.offset_at(selection.start)
        end = document.offset_at(selection.end)
        if end < start:
            start, end = end, start
        replacements.append(Replacement(selection, format_italic_text(content[start:end])))
    log.debug("Italic toggle on %d selection(s)", len(replacements))
    return replacements
