"""Link, video and include markup."""

import platform


def _is_windows():
    return platform.system() == "Windows"


def internal_link_builder(is_art, path_selection, selected_text="", language_id=None):
    """Link to a file in the same repository.

    Art (images) use ``![alt](path)``. In YAML documents a plain link is
    just the path, the way front matter references files.
    """
    start_brace = "![" if is_art else "["

    if path_selection == "":
        link = f"{start_brace}{selected_text}]()"
    else:
        link = f"{start_brace}{selected_text}]({path_selection})"

    lang_id = language_id or "markdown"
    if lang_id == "yaml" and not is_art:
        link = path_selection

    # Image paths always use forward slashes; other links only on Windows.
    if _is_windows() or is_art:
        link = link.replace("\\", "/")

    return link


def external_link_builder(link, title=""):
    if title == "":
        title = link
    return f"[{title}]({link})"


def video_link_builder(link):
    return f"> [!VIDEO {link}]"


def include_builder(link, title):
    # e.g. [!INCLUDE [sampleinclude](./includes/sampleinclude.md)]
    return f"[!INCLUDE [{title}]({link})]"
