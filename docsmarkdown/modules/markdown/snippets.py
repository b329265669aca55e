"""Code snippet references (``:::code ...:::``).

The workflow is a chain of prompts. Each prompt may be dismissed; the
first dismissal ends the chain and nothing is produced.
"""

import logging
import os
from collections import namedtuple

from docsmarkdown.framework.editor import Choice
from docsmarkdown.modules.markdown.languages import (
    find_language,
    get_language_choices,
    infer_language_from_file_extension,
)

log = logging.getLogger("docsmarkdown.markdown")

SnippetReference = namedtuple("SnippetReference", ["language", "relative_path"])

MSG_NO_LANGUAGE = "No code language selected. Abandoning command."
MSG_UNKNOWN_LANGUAGE = "Unable to determine language. Abandoning command."

SELECTOR_CHOICES = (
    Choice("Id", "Select code by id tag (for example: <Snippet1>)"),
    Choice("Range", "Select code by line range (for example: 1-15,18,20)"),
    Choice("None", "Select entire file"),
)


def snippet_builder(language, relative_path, id=None, range=None):
    # No opening quote before the id.
    if id:
        return f':::code language="{language}" source="{relative_path}" id={id}":::'
    elif range:
        return f':::code language="{language}" source="{relative_path}" range="{range}":::'
    else:
        return f':::code language="{language}" source="{relative_path}":::'


def relative_link(active_file, target_file):
    """Path from *active_file*'s folder to *target_file*, with '/' separators."""
    active_dir = os.path.dirname(active_file) or os.getcwd()
    target_dir, base = os.path.split(target_file)
    relative = os.path.relpath(target_dir, active_dir)
    if relative == os.curdir:
        relative = ""
    return os.path.join(relative, base).replace("\\", "/")


def find_matching_files(files, search_term):
    """Files whose full path contains *search_term* (case-sensitive)."""
    return [f for f in files if search_term in f]


def _pick_language(descriptor, prompts, warn):
    if descriptor is not None:
        return descriptor.aliases[0]

    picked = prompts.ask_choice(
        get_language_choices(),
        placeholder="Select a programming language (required)",
    )
    if not picked:
        _warn(warn, MSG_NO_LANGUAGE)
        return None

    selected = find_language(picked.label)
    if selected is None or not selected.aliases:
        _warn(warn, MSG_UNKNOWN_LANGUAGE)
        return None
    return selected.aliases[0]


def _warn(warn, message):
    log.warning(message)
    if warn is not None:
        warn(message)


def resolve_snippet_reference(editor, prompts, workspace, folder_path,
                              full_path=None, cross_reference=None, warn=None):
    """Ask for the snippet file and work out its language and link.

    Without *cross_reference* the user searches the workspace under
    *full_path* (default *folder_path*) and picks one of the matches.
    With it, the user types a path inside that sibling repository.

    Returns:
        SnippetReference, or None if the user cancelled.
    """
    if not cross_reference:
        search_term = prompts.ask_text("Enter snippet search terms.")
        if not search_term:
            return None
        root = full_path if full_path is not None else folder_path

        files = workspace.list_files(root)
        options = [
            Choice(os.path.basename(f), f)
            for f in find_matching_files(files, search_term)
        ]
        log.debug("Snippet search '%s': %d of %d files match",
                  search_term, len(options), len(files))

        selected = prompts.ask_choice(options)
        if not selected:
            return None

        snippet_link = relative_link(editor.document.file_name, selected.description)
        descriptor = infer_language_from_file_extension(
            os.path.splitext(selected.description)[1])
    else:
        input_repo_path = prompts.ask_text(
            "Enter file path for Cross-Reference GitHub Repo")
        if not input_repo_path:
            return None
        descriptor = infer_language_from_file_extension(
            os.path.splitext(input_repo_path)[1])
        snippet_link = f"~/{cross_reference}/{input_repo_path}"

    language = _pick_language(descriptor, prompts, warn)
    if not language:
        return None
    return SnippetReference(language, snippet_link)


def choose_selector(prompts):
    """Ask how much of the file to include.

    Returns:
        ("id", value), ("range", value) or ("none", None); None if cancelled.
    """
    choice = prompts.ask_choice(list(SELECTOR_CHOICES))
    if not choice:
        return None

    kind = choice.label.lower()
    if kind == "id":
        value = prompts.ask_text("Enter id to select")
    elif kind == "range":
        value = prompts.ask_text("Enter line selection range")
    else:
        return "none", None

    if not value:
        return None
    return kind, value


def search(editor, prompts, workspace, folder_path, full_path=None,
           cross_reference=None, warn=None):
    """Run the whole snippet workflow and return the directive, or None."""
    reference = resolve_snippet_reference(
        editor, prompts, workspace, folder_path,
        full_path=full_path, cross_reference=cross_reference, warn=warn)
    if reference is None:
        return None

    selector = choose_selector(prompts)
    if selector is None:
        return None

    kind, value = selector
    if kind == "id":
        return snippet_builder(reference.language, reference.relative_path, id=value)
    if kind == "range":
        return snippet_builder(reference.language, reference.relative_path, range=value)
    return snippet_builder(reference.language, reference.relative_path)
