"""Base class for all editor commands."""

from abc import ABC, abstractmethod


class CommandBase(ABC):
    """Abstract base for every command the host can invoke.

    Subclasses must set ``name``, ``title`` and implement ``execute``.

    Attributes:
        name:        Unique command identifier (e.g. "insert_table").
        title:       Label shown in the host's command palette / menu.
        parameters:  JSON Schema dict describing optional arguments.
        doc_types:   Supported document language ids (["markdown"], or
                     None for all documents).
    """

    name: str = None
    title: str = ""
    parameters: dict = None
    doc_types: list = None

    def validate(self, **kwargs):
        """Validate arguments against ``parameters`` schema.

        Returns:
            (ok: bool, error_message: str | None)
        """
        schema = self.parameters or {}
        required = schema.get("required", [])
        for key in required:
            if key not in kwargs:
                return False, f"Missing required parameter: {key}"
        props = schema.get("properties", {})
        for key in kwargs:
            if props and key not in props:
                return False, f"Unknown parameter: {key}"
        return True, None

    @abstractmethod
    def execute(self, ctx, **kwargs):
        """Run the command.

        Args:
            ctx:    CommandContext with editor, prompts, workspace, services.
            **kwargs: Command arguments (already validated).

        Returns:
            dict with at least ``{"status": "ok"|"cancelled"|"error", ...}``.
        """
