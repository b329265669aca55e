"""Code snippet command."""

from docsmarkdown.framework.command_base import CommandBase
from docsmarkdown.modules.markdown.commands._common import (
    CANCELLED,
    insert_content,
    no_editor,
)
from docsmarkdown.modules.markdown.snippets import search


class InsertSnippet(CommandBase):
    """Insert a ``:::code`` reference to a file in this or a sibling repo."""

    name = "insert_snippet"
    title = "Insert code snippet"
    parameters = {
        "type": "object",
        "properties": {
            "full_path": {
                "type": "string",
                "description": "Folder to search (default: workspace root).",
            },
            "cross_reference": {
                "type": "string",
                "description": "Name of a sibling repository checked out next to this one.",
            },
        },
    }
    doc_types = ["markdown"]

    def execute(self, ctx, **kwargs):
        error = no_editor(ctx)
        if error:
            return error

        snippet = search(
            ctx.editor,
            ctx.prompts,
            ctx.workspace,
            ctx.workspace.root,
            full_path=kwargs.get("full_path"),
            cross_reference=kwargs.get("cross_reference"),
            warn=ctx.warn,
        )
        if snippet is None:
            return CANCELLED
        return insert_content(ctx, self.name, snippet)
