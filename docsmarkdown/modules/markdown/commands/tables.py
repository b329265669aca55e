"""Table command."""

from docsmarkdown.framework.command_base import CommandBase
from docsmarkdown.modules.markdown.commands._common import (
    CANCELLED,
    insert_content,
    no_editor,
)
from docsmarkdown.modules.markdown.tables import (
    table_builder,
    validate_table_row_and_column_count,
)


class InsertTable(CommandBase):
    """Ask for "C:R" and insert an empty Markdown table."""

    name = "insert_table"
    title = "Insert table"
    parameters = {"type": "object", "properties": {}}
    doc_types = ["markdown"]

    def execute(self, ctx, **kwargs):
        error = no_editor(ctx)
        if error:
            return error

        size = ctx.prompts.ask_text(
            "Input the number of columns and rows as C:R",
            placeholder="C:R. Example: 3:4 (3 columns and 4 rows)",
        )
        if not size:
            return CANCELLED

        parts = size.split(":")
        col_str = parts[0]
        row_str = parts[1] if len(parts) > 1 else None

        valid = validate_table_row_and_column_count(
            len(parts), col_str, row_str, warn=ctx.warn)
        if valid is None:
            return {"status": "error", "error": "Table size is not a number."}
        if not valid:
            return {"status": "error", "error": "Table size out of range."}

        return insert_content(ctx, self.name, table_builder(int(col_str), int(row_str)))
