"""Host editor collaborators.

Commands never talk to a concrete editor. They receive objects that
implement the interfaces below through the CommandContext:

- ``TextDocument``  : text snapshot with offset <-> position conversion
- ``TextEditor``    : the active editor: selections, insert, batched edit
- ``Prompter``      : free-text and single-choice input, both cancellable
- ``Notifier``      : user-visible warnings
- ``Workspace``     : recursive file listing

``TextBuffer``, ``BufferEditor`` and ``LocalWorkspace`` are in-process
implementations used by headless runs and the test suite.
"""

import logging
import os
from abc import ABC, abstractmethod
from bisect import bisect_right
from collections import namedtuple

log = logging.getLogger("docsmarkdown.editor")


Position = namedtuple("Position", ["line", "character"])


class Range(namedtuple("Range", ["start", "end"])):
    """Span between two Positions (a selection when it comes from the editor)."""

    __slots__ = ()

    @property
    def is_empty(self):
        return self.start == self.end


Choice = namedtuple("Choice", ["label", "description"], defaults=[""])

# One span of a batched edit: ``selection`` is a Range, ``value`` the new text.
Replacement = namedtuple("Replacement", ["selection", "value"])


# ── Interfaces ────────────────────────────────────────────────────────


class TextDocument(ABC):
    """A document open in the host editor."""

    file_name: str = ""
    language_id: str = "markdown"

    @abstractmethod
    def get_text(self):
        """Return the whole document text."""

    @abstractmethod
    def position_at(self, offset):
        """Convert a character offset into a Position."""

    @abstractmethod
    def offset_at(self, position):
        """Convert a Position into a character offset."""


class TextEditor(ABC):
    """The active editor showing one TextDocument."""

    document: TextDocument = None

    @property
    @abstractmethod
    def selections(self):
        """List of Range, primary selection first."""

    @property
    def selection(self):
        return self.selections[0]

    @abstractmethod
    def edit(self, replacements):
        """Apply all *replacements* as one atomic edit. Returns True on success."""

    def insert(self, content, selection=None):
        """Replace *selection* (default: the primary selection) with *content*."""
        target = selection if selection is not None else self.selection
        return self.edit([Replacement(target, content)])


class Prompter(ABC):
    """User input elicitation. Cancellation returns None (or "")."""

    @abstractmethod
    def ask_text(self, prompt, placeholder=None):
        """Ask for a single line of text."""

    @abstractmethod
    def ask_choice(self, items, placeholder=None):
        """Ask the user to pick one of *items* (Choice). Returns the Choice."""


class Notifier(ABC):
    """User-visible notification sink."""

    @abstractmethod
    def warning(self, message):
        """Show a warning message."""


class Workspace(ABC):
    """Files available to the current document."""

    root: str = ""

    @abstractmethod
    def list_files(self, path):
        """Return every file under *path*, recursively, as full paths."""


# ── In-process implementations ───────────────────────────────────────


class TextBuffer(TextDocument):
    """In-memory TextDocument.

    Lines are separated by ``\\n``; a Position's character is the offset
    from the start of its line. Out-of-range values are clamped, the way
    editors do.
    """

    def __init__(self, text="", file_name="", language_id="markdown"):
        self.file_name = file_name
        self.language_id = language_id
        self.version = 0
        self._set_text(text)

    def _set_text(self, text):
        self._text = text
        self._line_starts = [0]
        for i, ch in enumerate(text):
            if ch == "\n":
                self._line_starts.append(i + 1)

    def get_text(self):
        return self._text

    @property
    def line_count(self):
        return len(self._line_starts)

    def line_at(self, line):
        start = self._line_starts[line]
        if line + 1 < len(self._line_starts):
            end = self._line_starts[line + 1] - 1
        else:
            end = len(self._text)
        return self._text[start:end]

    def position_at(self, offset):
        offset = max(0, min(offset, len(self._text)))
        line = bisect_right(self._line_starts, offset) - 1
        return Position(line, offset - self._line_starts[line])

    def offset_at(self, position):
        line = max(0, min(position.line, len(self._line_starts) - 1))
        start = self._line_starts[line]
        if line + 1 < len(self._line_starts):
            end = self._line_starts[line + 1] - 1
        else:
            end = len(self._text)
        return min(start + max(0, position.character), end)

    def apply_edits(self, replacements):
        """Apply *replacements* against the current text in one step.

        Every range is converted to offsets before anything changes, so
        all spans refer to the same snapshot. Overlapping spans raise
        ValueError and leave the buffer untouched.
        """
        spans = []
        for rep in replacements:
            start = self.offset_at(rep.selection.start)
            end = self.offset_at(rep.selection.end)
            if end < start:
                start, end = end, start
            spans.append((start, end, rep.value))

        spans.sort(key=lambda s: (s[0], s[1]))
        for prev, cur in zip(spans, spans[1:]):
            if cur[0] < prev[1]:
                raise ValueError("Overlapping edits at offset %d" % cur[0])

        text = self._text
        for start, end, value in reversed(spans):
            text = text[:start] + value + text[end:]
        self._set_text(text)
        self.version += 1


class BufferEditor(TextEditor):
    """TextEditor over a TextBuffer."""

    def __init__(self, document, selections=None):
        self.document = document
        self._selections = list(selections or [Range(Position(0, 0), Position(0, 0))])

    @property
    def selections(self):
        return list(self._selections)

    @selections.setter
    def selections(self, value):
        self._selections = list(value)

    def select(self, start_line, start_char, end_line, end_char):
        self._selections = [
            Range(Position(start_line, start_char), Position(end_line, end_char))
        ]

    def edit(self, replacements):
        replacements = list(replacements)
        if not replacements:
            return True
        try:
            self.document.apply_edits(replacements)
        except ValueError:
            log.exception("Edit rejected")
            return False
        return True


class LocalWorkspace(Workspace):
    """Workspace backed by the local filesystem."""

    def __init__(self, root):
        self.root = root

    def list_files(self, path):
        found = []
        for dirpath, dirnames, filenames in os.walk(path):
            dirnames.sort()
            for name in sorted(filenames):
                found.append(os.path.join(dirpath, name))
        log.debug("Listed %d files under %s", len(found), path)
        return found


def is_markdown(document):
    """True when *document* is a Markdown document."""
    return document is not None and document.language_id == "markdown"
