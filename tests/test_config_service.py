"""Tests for docsmarkdown.modules.core.services.config (ConfigService + ModuleConfigProxy)."""

import json

import pytest

from docsmarkdown.framework.event_bus import EventBus
from docsmarkdown.modules.core.services.config import (
    ENV_OVERRIDES,
    ConfigAccessError,
    ConfigService,
    ModuleConfigProxy,
)


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "docsmarkdown.json"


@pytest.fixture
def config_svc(config_path, monkeypatch):
    monkeypatch.delenv(ENV_OVERRIDES, raising=False)
    return ConfigService(str(config_path))


@pytest.fixture
def manifest():
    return {
        "core": {
            "config": {
                "log_level": {"type": "string", "default": "WARN", "public": True},
            }
        },
        "markdown": {
            "config": {
                "replace_smart_quotes": {"type": "boolean", "default": True, "public": True},
                "max_rows": {"type": "int", "default": 50},
                "ratio": {"type": "float", "default": 1.5},
            }
        },
    }


class TestDefaults:
    def test_manifest_defaults(self, config_svc, manifest):
        config_svc.set_manifest(manifest)
        assert config_svc.get("markdown.replace_smart_quotes") is True
        assert config_svc.get("core.log_level") == "WARN"

    def test_unknown_key(self, config_svc):
        assert config_svc.get("nonexistent.key") is None

    def test_register_default(self, config_svc):
        config_svc.register_default("custom.key", 42)
        assert config_svc.get("custom.key") == 42


class TestSetGet:
    def test_set_persists_json(self, config_svc, config_path, manifest):
        config_svc.set_manifest(manifest)
        config_svc.set("markdown.replace_smart_quotes", False)
        assert config_svc.get("markdown.replace_smart_quotes") is False
        assert json.loads(config_path.read_text(encoding="utf-8")) == {
            "markdown.replace_smart_quotes": False
        }

    def test_new_instance_reads_file(self, config_svc, config_path, manifest):
        config_svc.set_manifest(manifest)
        config_svc.set("core.log_level", "DEBUG")
        fresh = ConfigService(str(config_path))
        fresh.set_manifest(manifest)
        assert fresh.get("core.log_level") == "DEBUG"

    def test_get_dict_merges(self, config_svc, manifest):
        config_svc.set_manifest(manifest)
        config_svc.set("markdown.max_rows", 10)
        values = config_svc.get_dict()
        assert values["markdown.max_rows"] == 10
        assert values["core.log_level"] == "WARN"

    def test_remove_restores_default(self, config_svc, manifest):
        config_svc.set_manifest(manifest)
        config_svc.set("markdown.replace_smart_quotes", False)
        config_svc.remove("markdown.replace_smart_quotes")
        assert config_svc.get("markdown.replace_smart_quotes") is True

    def test_remove_absent_key(self, config_svc, config_path):
        config_svc.remove("markdown.replace_smart_quotes")
        assert not config_path.exists()


class TestBrokenFile:
    def test_invalid_json_falls_back_to_defaults(self, config_svc, config_path, manifest):
        config_path.write_text("{not json", encoding="utf-8")
        config_svc.set_manifest(manifest)
        assert config_svc.get("core.log_level") == "WARN"

    def test_non_object_json(self, config_svc, config_path, manifest):
        config_path.write_text("[1, 2]", encoding="utf-8")
        config_svc.set_manifest(manifest)
        assert config_svc.get("core.log_level") == "WARN"

    def test_byte_order_mark_is_ignored(self, config_svc, config_path, manifest):
        config_path.write_text(
            "\ufeff" + json.dumps({"core.log_level": "ERROR"}), encoding="utf-8")
        config_svc.set_manifest(manifest)
        assert config_svc.get("core.log_level") == "ERROR"

    def test_unwritable_path_raises(self, tmp_path):
        svc = ConfigService(str(tmp_path / "missing" / "dir" / "cfg.json"))
        with pytest.raises(OSError):
            svc.set("markdown.replace_smart_quotes", False)


class TestEvents:
    def test_change_emits(self, config_svc, manifest):
        bus = EventBus()
        seen = []
        bus.subscribe("config:changed", lambda **kw: seen.append(kw))
        config_svc.set_events(bus)
        config_svc.set_manifest(manifest)

        config_svc.set("core.log_level", "DEBUG")
        assert seen == [{"key": "core.log_level", "value": "DEBUG", "old_value": "WARN"}]

    def test_same_value_is_silent(self, config_svc, manifest):
        bus = EventBus()
        seen = []
        bus.subscribe("config:changed", lambda **kw: seen.append(kw))
        config_svc.set_events(bus)
        config_svc.set_manifest(manifest)

        config_svc.set("core.log_level", "WARN")
        assert seen == []

    def test_remove_emits_default(self, config_svc, manifest):
        bus = EventBus()
        seen = []
        config_svc.set_events(bus)
        config_svc.set_manifest(manifest)
        config_svc.set("markdown.replace_smart_quotes", False)
        bus.subscribe("config:changed", lambda **kw: seen.append(kw))

        config_svc.remove("markdown.replace_smart_quotes")
        assert seen == [{
            "key": "markdown.replace_smart_quotes", "value": True, "old_value": False,
        }]


class TestAccessControl:
    def test_read_own_and_public(self, config_svc, manifest):
        config_svc.set_manifest(manifest)
        assert config_svc.get("markdown.max_rows", caller_module="markdown") == 50
        assert config_svc.get("core.log_level", caller_module="markdown") == "WARN"

    def test_read_private_of_other_module(self, config_svc, manifest):
        config_svc.set_manifest(manifest)
        with pytest.raises(ConfigAccessError, match="cannot read private"):
            config_svc.get("markdown.max_rows", caller_module="core")

    def test_write_other_module(self, config_svc, manifest):
        config_svc.set_manifest(manifest)
        with pytest.raises(ConfigAccessError, match="cannot write"):
            config_svc.set("core.log_level", "DEBUG", caller_module="markdown")
        with pytest.raises(ConfigAccessError):
            config_svc.remove("core.log_level", caller_module="markdown")

    def test_no_caller_is_unrestricted(self, config_svc, manifest):
        config_svc.set_manifest(manifest)
        assert config_svc.get("markdown.max_rows") == 50


class TestEnvOverrides:
    def test_coerced_to_declared_type(self, config_svc, manifest, monkeypatch):
        monkeypatch.setenv(
            ENV_OVERRIDES,
            "markdown.replace_smart_quotes=false, markdown.max_rows=7,"
            "markdown.ratio=0.5,core.log_level=DEBUG,garbage",
        )
        config_svc.set_manifest(manifest)
        assert config_svc.get("markdown.replace_smart_quotes") is False
        assert config_svc.get("markdown.max_rows") == 7
        assert config_svc.get("markdown.ratio") == 0.5
        assert config_svc.get("core.log_level") == "DEBUG"

    def test_bad_number_kept_as_string(self, config_svc, manifest, monkeypatch):
        monkeypatch.setenv(ENV_OVERRIDES, "markdown.max_rows=lots")
        config_svc.set_manifest(manifest)
        assert config_svc.get("markdown.max_rows") == "lots"

    def test_user_file_wins(self, config_svc, config_path, manifest, monkeypatch):
        config_path.write_text(json.dumps({"core.log_level": "ERROR"}), encoding="utf-8")
        monkeypatch.setenv(ENV_OVERRIDES, "core.log_level=DEBUG")
        config_svc.set_manifest(manifest)
        assert config_svc.get("core.log_level") == "ERROR"


class TestProxy:
    def test_short_keys_are_prefixed(self, config_svc, manifest):
        config_svc.set_manifest(manifest)
        proxy = config_svc.proxy_for("markdown")
        assert isinstance(proxy, ModuleConfigProxy)
        assert proxy.get("replace_smart_quotes") is True
        proxy.set("replace_smart_quotes", False)
        assert config_svc.get("markdown.replace_smart_quotes") is False
        proxy.remove("replace_smart_quotes")
        assert proxy.get("replace_smart_quotes") is True

    def test_default_for_missing(self, config_svc):
        assert config_svc.proxy_for("markdown").get("absent", "fallback") == "fallback"

    def test_cross_module_public_read(self, config_svc, manifest):
        config_svc.set_manifest(manifest)
        assert config_svc.proxy_for("markdown").get("core.log_level") == "WARN"

    def test_cross_module_write_denied(self, config_svc, manifest):
        config_svc.set_manifest(manifest)
        with pytest.raises(ConfigAccessError):
            config_svc.proxy_for("markdown").set("core.log_level", "DEBUG")


class TestFileCache:
    def _count_parses(self, monkeypatch):
        from docsmarkdown.modules.core.services import config as config_module

        calls = []
        real_loads = config_module.json.loads

        def counting_loads(text):
            calls.append(text)
            return real_loads(text)

        monkeypatch.setattr(config_module.json, "loads", counting_loads)
        return calls

    def test_unchanged_file_parsed_once(self, config_svc, config_path, manifest, monkeypatch):
        config_path.write_text(json.dumps({"core.log_level": "ERROR"}), encoding="utf-8")
        config_svc.set_manifest(manifest)
        calls = self._count_parses(monkeypatch)
        for _ in range(5):
            assert config_svc.get("core.log_level") == "ERROR"
        assert len(calls) == 1

    def test_set_is_visible_immediately(self, config_svc, manifest):
        config_svc.set_manifest(manifest)
        assert config_svc.get("core.log_level") == "WARN"
        config_svc.set("core.log_level", "DEBUG")
        assert config_svc.get("core.log_level") == "DEBUG"
        config_svc.remove("core.log_level")
        assert config_svc.get("core.log_level") == "WARN"

    def test_external_edit_is_picked_up(self, config_svc, config_path, manifest):
        config_svc.set_manifest(manifest)
        config_path.write_text(json.dumps({"core.log_level": "ERROR"}), encoding="utf-8")
        assert config_svc.get("core.log_level") == "ERROR"
        config_path.write_text(json.dumps({"core.log_level": "INFO", "x.y": 1}), encoding="utf-8")
        assert config_svc.get("core.log_level") == "INFO"

    def test_cached_values_are_not_shared(self, config_svc, config_path, manifest):
        config_path.write_text(json.dumps({"core.log_level": "ERROR"}), encoding="utf-8")
        config_svc.set_manifest(manifest)
        config_svc.get_dict()["core.log_level"] = "mutated"
        assert config_svc.get("core.log_level") == "ERROR"
