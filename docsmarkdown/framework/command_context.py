"""Per-invocation context passed to every command execution."""


class CommandContext:
    """Immutable-ish context for a single command invocation.

    Attributes:
        editor:    Active TextEditor, or None when no document is open.
        prompts:   Prompter for text and choice input.
        workspace: Workspace used for file searches.
        notifier:  Notifier for user-visible warnings.
        services:  ServiceRegistry: access to all services.
        caller:    Who triggered the call ("menu", "shortcut", "test").
    """

    __slots__ = ("editor", "prompts", "workspace", "notifier", "services", "caller")

    def __init__(self, editor, prompts, workspace, notifier, services, caller=""):
        self.editor = editor
        self.prompts = prompts
        self.workspace = workspace
        self.notifier = notifier
        self.services = services
        self.caller = caller

    @property
    def doc_type(self):
        """Language id of the active document, or None."""
        if self.editor is None or self.editor.document is None:
            return None
        return self.editor.document.language_id

    def warn(self, message):
        """Forward *message* to the notifier (no-op without one)."""
        if self.notifier is not None:
            self.notifier.warning(message)
