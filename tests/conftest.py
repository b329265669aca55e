"""Shared fixtures: scripted prompts, recording notifier, in-memory editor."""

import pytest

from docsmarkdown.framework.command_context import CommandContext
from docsmarkdown.framework.editor import (
    BufferEditor,
    LocalWorkspace,
    Notifier,
    Position,
    Prompter,
    Range,
    TextBuffer,
    Workspace,
)
from docsmarkdown.framework.service_registry import ServiceRegistry


class ScriptedPrompter(Prompter):
    """Answers prompts from a queue; None plays the user dismissing it.

    A callable answer receives the offered items (or prompt) and returns
    the answer, so tests can pick by label.
    """

    def __init__(self, *answers):
        self.answers = list(answers)
        self.asked = []  # (kind, prompt-or-placeholder, items)

    def _next(self, arg):
        if not self.answers:
            raise AssertionError("Unexpected prompt: %r" % (self.asked[-1],))
        answer = self.answers.pop(0)
        return answer(arg) if callable(answer) else answer

    def ask_text(self, prompt, placeholder=None):
        self.asked.append(("text", prompt, None))
        return self._next(prompt)

    def ask_choice(self, items, placeholder=None):
        items = list(items)
        self.asked.append(("choice", placeholder, items))
        return self._next(items)


def pick(label):
    """Answer for a choice prompt: the item whose label is *label*."""
    def _pick(items):
        for item in items:
            if item.label == label:
                return item
        raise AssertionError("No choice labelled %r in %r" % (label, items))
    return _pick


class RecordingNotifier(Notifier):
    def __init__(self):
        self.warnings = []

    def warning(self, message):
        self.warnings.append(message)


class StaticWorkspace(Workspace):
    def __init__(self, root, files):
        self.root = root
        self.files = list(files)
        self.listed = []

    def list_files(self, path):
        self.listed.append(path)
        return list(self.files)


def make_editor(text="", file_name="/repo/articles/doc.md", language_id="markdown"):
    return BufferEditor(TextBuffer(text, file_name=file_name, language_id=language_id))


def select(editor, start_line, start_char, end_line, end_char):
    editor.selections = [
        Range(Position(start_line, start_char), Position(end_line, end_char))
    ]


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def make_ctx(notifier):
    """Factory for a CommandContext over an in-memory editor."""

    def _make(editor=None, prompts=None, workspace=None, services=None):
        return CommandContext(
            editor=editor,
            prompts=prompts or ScriptedPrompter(),
            workspace=workspace or StaticWorkspace("/repo", []),
            notifier=notifier,
            services=services or ServiceRegistry(),
            caller="test",
        )

    return _make


@pytest.fixture
def local_workspace(tmp_path):
    """A small repository on disk."""
    (tmp_path / "articles" / "media").mkdir(parents=True)
    (tmp_path / "articles" / "includes").mkdir()
    (tmp_path / "samples" / "python").mkdir(parents=True)
    (tmp_path / "articles" / "doc.md").write_text("# Doc\n", encoding="utf-8")
    (tmp_path / "articles" / "other.md").write_text("# Other\n", encoding="utf-8")
    (tmp_path / "articles" / "includes" / "note.md").write_text("Note\n", encoding="utf-8")
    (tmp_path / "articles" / "media" / "diagram.png").write_bytes(b"\x89PNG")
    (tmp_path / "samples" / "python" / "hello.py").write_text("print('hi')\n", encoding="utf-8")
    (tmp_path / "samples" / "python" / "data.unknownext").write_text("x\n", encoding="utf-8")
    return LocalWorkspace(str(tmp_path))
