"""Emphasis commands."""

from docsmarkdown.framework.command_base import CommandBase
from docsmarkdown.framework.editor import is_markdown
from docsmarkdown.modules.markdown.commands._common import NOT_MARKDOWN, no_editor
from docsmarkdown.modules.markdown.formatting import italic_replacements


class FormatItalic(CommandBase):
    """Toggle italics on every selection."""

    name = "format_italic"
    title = "Italic"
    parameters = {"type": "object", "properties": {}}

    def execute(self, ctx, **kwargs):
        error = no_editor(ctx)
        if error:
            return error
        if not is_markdown(ctx.editor.document):
            ctx.warn(NOT_MARKDOWN)
            return {"status": "error", "error": NOT_MARKDOWN}

        replacements = italic_replacements(ctx.editor)
        if not ctx.editor.edit(replacements):
            return {"status": "error", "error": "Editor rejected the edit."}
        return {"status": "ok", "count": len(replacements)}
