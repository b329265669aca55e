"""Helpers shared by the markdown commands."""

import logging

log = logging.getLogger("docsmarkdown.markdown")

NO_ACTIVE_EDITOR = "No active editor."
NOT_MARKDOWN = "This command only works in Markdown files."

CANCELLED = {"status": "cancelled"}


def no_editor(ctx):
    """Warn and return an error result when there is no active editor."""
    if ctx.editor is None or ctx.editor.document is None:
        ctx.warn(NO_ACTIVE_EDITOR)
        return {"status": "error", "error": NO_ACTIVE_EDITOR}
    return None


def selected_text(editor):
    document = editor.document
    start = document.offset_at(editor.selection.start)
    end = document.offset_at(editor.selection.end)
    if end < start:
        start, end = end, start
    return document.get_text()[start:end]


def insert_content(ctx, sender, content):
    """Replace the primary selection with *content* and report the result."""
    if not ctx.editor.insert(content):
        log.error("%s: editor rejected the insertion", sender)
        return {"status": "error", "error": "Editor rejected the insertion."}
    log.debug("%s inserted %d characters", sender, len(content))
    return {"status": "ok", "content": content}
