"""Link, video and include commands."""

import logging
import os

from docsmarkdown.framework.command_base import CommandBase
from docsmarkdown.framework.editor import Choice
from docsmarkdown.modules.markdown.commands._common import (
    CANCELLED,
    insert_content,
    no_editor,
    selected_text,
)
from docsmarkdown.modules.markdown.links import (
    external_link_builder,
    include_builder,
    internal_link_builder,
    video_link_builder,
)
from docsmarkdown.modules.markdown.snippets import relative_link

log = logging.getLogger("docsmarkdown.markdown")

MARKDOWN_EXTENSIONS = (".md", ".markdown")
IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".gif", ".svg")

NO_FILES = "No matching files found in the workspace."


def _pick_file(ctx, extensions, placeholder):
    """Let the user choose a workspace file with one of *extensions*.

    The active document itself is never offered.
    """
    active = os.path.normpath(ctx.editor.document.file_name or "")
    options = [
        Choice(os.path.basename(f), f)
        for f in ctx.workspace.list_files(ctx.workspace.root)
        if os.path.splitext(f)[1].lower() in extensions
        and os.path.normpath(f) != active
    ]
    log.debug("%d candidate file(s) for %s", len(options), placeholder)
    if not options:
        ctx.warn(NO_FILES)
        return None
    picked = ctx.prompts.ask_choice(options, placeholder=placeholder)
    return picked.description if picked else None


class InsertExternalLink(CommandBase):
    """Link the selected text to a URL."""

    name = "insert_external_link"
    title = "Insert external link"
    parameters = {"type": "object", "properties": {}}
    doc_types = ["markdown"]

    def execute(self, ctx, **kwargs):
        error = no_editor(ctx)
        if error:
            return error

        url = ctx.prompts.ask_text("Enter URL", placeholder="https://")
        if not url:
            return CANCELLED
        return insert_content(
            ctx, self.name, external_link_builder(url, selected_text(ctx.editor)))


class InsertInternalLink(CommandBase):
    """Link the selected text to a Markdown file (or show an image) from the repo."""

    name = "insert_internal_link"
    title = "Insert link to file in repo"
    parameters = {
        "type": "object",
        "properties": {
            "art": {
                "type": "boolean",
                "description": "Insert an image reference instead of a link.",
            },
        },
    }
    doc_types = ["markdown", "yaml"]

    def execute(self, ctx, **kwargs):
        error = no_editor(ctx)
        if error:
            return error

        is_art = bool(kwargs.get("art", False))
        if is_art:
            target = _pick_file(ctx, IMAGE_EXTENSIONS, "Select an image")
        else:
            target = _pick_file(ctx, MARKDOWN_EXTENSIONS, "Select a file to link to")
        if target is None:
            return CANCELLED

        document = ctx.editor.document
        active_dir = os.path.dirname(document.file_name) or os.getcwd()
        path = os.path.relpath(target, active_dir)
        link = internal_link_builder(
            is_art, path, selected_text(ctx.editor), document.language_id)
        return insert_content(ctx, self.name, link)


class InsertVideo(CommandBase):
    """Embed a video by URL."""

    name = "insert_video"
    title = "Insert video"
    parameters = {"type": "object", "properties": {}}
    doc_types = ["markdown"]

    def execute(self, ctx, **kwargs):
        error = no_editor(ctx)
        if error:
            return error

        url = ctx.prompts.ask_text(
            "Enter URL for the video", placeholder="https://channel9.msdn.com/...")
        if not url:
            return CANCELLED
        return insert_content(ctx, self.name, video_link_builder(url))


class InsertInclude(CommandBase):
    """Include another Markdown file from the repo."""

    name = "insert_include"
    title = "Insert include"
    parameters = {"type": "object", "properties": {}}
    doc_types = ["markdown"]

    def execute(self, ctx, **kwargs):
        error = no_editor(ctx)
        if error:
            return error

        target = _pick_file(ctx, MARKDOWN_EXTENSIONS, "Select a file to include")
        if target is None:
            return CANCELLED

        title = os.path.splitext(os.path.basename(target))[0]
        link = relative_link(ctx.editor.document.file_name, target)
        return insert_content(ctx, self.name, include_builder(link, title))
