"""End-to-end tests for the markdown commands, run through the registry."""

import os

import pytest
from conftest import ScriptedPrompter, StaticWorkspace, make_editor, pick, select

import docsmarkdown.modules.markdown.commands as markdown_commands
from docsmarkdown.framework.command_registry import CommandRegistry
from docsmarkdown.framework.event_bus import EventBus
from docsmarkdown.framework.service_registry import ServiceRegistry
from docsmarkdown.modules.markdown.commands._common import NO_ACTIVE_EDITOR, NOT_MARKDOWN
from docsmarkdown.modules.markdown.commands.links import NO_FILES
from docsmarkdown.modules.markdown.tables import MSG_TOO_MANY_COLUMNS, table_builder

REPO_FILES = [
    "/repo/articles/doc.md",
    "/repo/articles/other.md",
    "/repo/articles/includes/note.md",
    "/repo/articles/media/diagram.png",
    "/repo/samples/python/hello.py",
]


@pytest.fixture
def services():
    services = ServiceRegistry()
    services.register_instance("events", EventBus())
    return services


@pytest.fixture
def run(make_ctx, services):
    registry = CommandRegistry(services)
    registry.discover(os.path.dirname(markdown_commands.__file__),
                      "docsmarkdown.modules.markdown.commands")

    def _run(name, editor, *answers, files=REPO_FILES, **kwargs):
        ctx = make_ctx(
            editor=editor,
            prompts=ScriptedPrompter(*answers),
            workspace=StaticWorkspace("/repo", files),
            services=services,
        )
        return registry.execute(name, ctx, **kwargs), ctx

    return _run


class TestInsertTable:
    def test_inserts_at_cursor(self, run):
        editor = make_editor("Intro\n")
        select(editor, 1, 0, 1, 0)
        result, _ = run("insert_table", editor, "3:2")
        assert result["status"] == "ok"
        assert editor.document.get_text() == "Intro\n" + table_builder(3, 2)

    def test_out_of_range_warns(self, run, notifier):
        editor = make_editor()
        result, _ = run("insert_table", editor, "5:1")
        assert result == {"status": "error", "error": "Table size out of range."}
        assert notifier.warnings == [MSG_TOO_MANY_COLUMNS]
        assert editor.document.get_text() == ""

    def test_not_a_number(self, run, notifier):
        result, _ = run("insert_table", make_editor(), "a:b")
        assert result["error"] == "Table size is not a number."
        assert notifier.warnings == []

    def test_full_width_digits_not_a_number(self, run):
        editor = make_editor()
        result, _ = run("insert_table", editor, "\uff13:\uff14")
        assert result["error"] == "Table size is not a number."
        assert editor.document.get_text() == ""

    def test_cancelled(self, run):
        result, _ = run("insert_table", make_editor(), None)
        assert result == {"status": "cancelled"}

    def test_prompt_text(self, run):
        _, ctx = run("insert_table", make_editor(), None)
        assert ctx.prompts.asked[0][1] == "Input the number of columns and rows as C:R"

    def test_no_editor(self, run, notifier):
        result, _ = run("insert_table", None)
        assert result["error"] == NO_ACTIVE_EDITOR
        assert notifier.warnings == [NO_ACTIVE_EDITOR]

    def test_rejected_for_yaml(self, run):
        with pytest.raises(ValueError):
            run("insert_table", make_editor(language_id="yaml"), "2:2")


class TestInsertSnippet:
    def test_whole_file(self, run):
        editor = make_editor()
        result, _ = run("insert_snippet", editor, "hello", pick("hello.py"), pick("None"))
        expected = ':::code language="python" source="../samples/python/hello.py":::'
        assert result == {"status": "ok", "content": expected}
        assert editor.document.get_text() == expected

    def test_cross_reference(self, run):
        editor = make_editor()
        result, _ = run("insert_snippet", editor, "src/Program.cs", pick("Range"), "3-9",
                        cross_reference="dotnet-samples")
        assert result["content"] == \
            ':::code language="csharp" source="~/dotnet-samples/src/Program.cs" range="3-9":::'

    def test_cancelled_leaves_document(self, run):
        editor = make_editor("keep")
        result, _ = run("insert_snippet", editor, None)
        assert result == {"status": "cancelled"}
        assert editor.document.get_text() == "keep"

    def test_unknown_parameter(self, run):
        result, _ = run("insert_snippet", make_editor(), bogus="x")
        assert result["status"] == "error"


class TestInsertExternalLink:
    def test_uses_selection_as_title(self, run):
        editor = make_editor("see docs here")
        select(editor, 0, 4, 0, 8)
        run("insert_external_link", editor, "https://example.com")
        assert editor.document.get_text() == "see [docs](https://example.com) here"

    def test_url_as_title(self, run):
        editor = make_editor()
        result, _ = run("insert_external_link", editor, "https://example.com")
        assert result["content"] == "[https://example.com](https://example.com)"

    def test_cancelled(self, run):
        assert run("insert_external_link", make_editor(), "")[0] == {"status": "cancelled"}


class TestInsertInternalLink:
    def test_link_to_markdown_file(self, run):
        editor = make_editor("Other")
        select(editor, 0, 0, 0, 5)
        run("insert_internal_link", editor, pick("other.md"))
        assert editor.document.get_text() == "[Other](other.md)"

    def test_active_document_not_offered(self, run):
        _, ctx = run("insert_internal_link", make_editor(), None)
        labels = [item.label for item in ctx.prompts.asked[0][2]]
        assert labels == ["other.md", "note.md"]

    def test_art(self, run):
        editor = make_editor()
        result, _ = run("insert_internal_link", editor, pick("diagram.png"), art=True)
        assert result["content"] == "![](media/diagram.png)"

    def test_yaml_document_gets_bare_path(self, run):
        editor = make_editor(file_name="/repo/articles/toc.yml", language_id="yaml")
        result, _ = run("insert_internal_link", editor, pick("note.md"))
        assert result["content"] == "includes/note.md"

    def test_no_candidates(self, run, notifier):
        result, _ = run("insert_internal_link", make_editor(), files=["/repo/articles/doc.md"])
        assert result == {"status": "cancelled"}
        assert notifier.warnings == [NO_FILES]


class TestInsertVideo:
    def test_video(self, run):
        editor = make_editor()
        run("insert_video", editor, "https://example.com/v")
        assert editor.document.get_text() == "> [!VIDEO https://example.com/v]"

    def test_cancelled(self, run):
        assert run("insert_video", make_editor(), None)[0] == {"status": "cancelled"}


class TestInsertInclude:
    def test_include(self, run):
        editor = make_editor()
        result, _ = run("insert_include", editor, pick("note.md"))
        assert result["content"] == "[!INCLUDE [note](includes/note.md)]"


class TestFormatItalic:
    def test_toggles_selection(self, run):
        editor = make_editor("make this italic")
        select(editor, 0, 5, 0, 9)
        result, _ = run("format_italic", editor)
        assert result == {"status": "ok", "count": 1}
        assert editor.document.get_text() == "make *this* italic"

    def test_non_markdown_warns(self, run, notifier):
        editor = make_editor("x", language_id="plaintext")
        result, _ = run("format_italic", editor)
        assert result["error"] == NOT_MARKDOWN
        assert notifier.warnings == [NOT_MARKDOWN]
        assert editor.document.get_text() == "x"


class TestEvents:
    def test_lifecycle_events(self, run, services):
        seen = []
        services.events.subscribe(
            "command:completed", lambda **kw: seen.append((kw["name"], kw["status"])))
        run("insert_video", make_editor(), None)
        assert seen == [("insert_video", "cancelled")]
