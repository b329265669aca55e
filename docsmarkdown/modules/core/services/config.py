"""ConfigService: namespaced config persisted to a JSON file.

Defaults come from the module manifest; user values live in
``~/.docsmarkdown.json`` as a flat ``{"module.key": value}`` dict.

Access control:
  - Read own keys: always OK
  - Read other module's public keys: OK
  - Read other module's private keys: ConfigAccessError
  - Write own keys: OK
  - Write other module's keys: ConfigAccessError
"""

import json
import logging
import os

from docsmarkdown.framework.service_base import ServiceBase
from docsmarkdown.framework.text import strip_bom_from_string

log = logging.getLogger("docsmarkdown.config")

CONFIG_FILENAME = ".docsmarkdown.json"
ENV_OVERRIDES = "DOCSMARKDOWN_SET_CONFIG"


class ConfigAccessError(Exception):
    """Raised when a module tries to access a private config key."""


class ConfigService(ServiceBase):
    name = "config"

    def __init__(self, config_path=None):
        self._defaults = {}   # "module.key" -> default_value
        self._manifest = {}   # "module.key" -> field schema
        self._module_names = set()
        self._events = None   # EventBus, set after init
        self._cache = None    # (file stamp, parsed dict)
        self._config_path = config_path or os.path.join(
            os.path.expanduser("~"), CONFIG_FILENAME)

    def set_events(self, events):
        """Wire the event bus (called during bootstrap after events service)."""
        self._events = events

    def set_manifest(self, manifest):
        """Load config schemas from the merged manifest.

        Args:
            manifest: dict of {module_name: module_dict} from _manifest.py.
        """
        self._module_names = set(manifest.keys())

        for mod_name, mod_data in manifest.items():
            for field_name, schema in mod_data.get("config", {}).items():
                full_key = f"{mod_name}.{field_name}"
                self._defaults[full_key] = schema.get("default")
                self._manifest[full_key] = schema

        self._apply_env_overrides()

    def register_default(self, key, default):
        """Register a single default value."""
        self._defaults[key] = default

    # ── Read/Write ────────────────────────────────────────────────────

    def get(self, key, caller_module=None):
        """Get a config value from the user file, fallback to defaults."""
        self._check_read_access(key, caller_module)
        data = self._load()
        if key in data:
            return data[key]
        return self._defaults.get(key)

    def get_dict(self):
        """Return all config values as a flat dict (no access control)."""
        result = dict(self._defaults)
        result.update(self._load())
        return result

    def set(self, key, value, caller_module=None):
        """Persist a config value and emit config:changed."""
        self._check_write_access(key, caller_module)
        old_value = self.get(key)
        data = self._load()
        data[key] = value
        self._save(data)

        if self._events and value != old_value:
            self._events.emit(
                "config:changed", key=key, value=value, old_value=old_value
            )

    def remove(self, key, caller_module=None):
        """Reset a config key to its default by dropping the user value."""
        self._check_write_access(key, caller_module)
        data = self._load()
        if key in data:
            old_value = data.pop(key)
            self._save(data)
            default = self._defaults.get(key)
            if self._events and old_value != default:
                self._events.emit(
                    "config:changed", key=key, value=default, old_value=old_value
                )

    # ── Access control ────────────────────────────────────────────────

    def _check_read_access(self, key, caller_module):
        if caller_module is None:
            return
        if "." not in key:
            return
        module, _ = self._parse_key(key)
        if module == caller_module:
            return
        schema = self._manifest.get(key, {})
        if not schema.get("public", False):
            raise ConfigAccessError(
                f"Module '{caller_module}' cannot read private config '{key}'"
            )

    def _check_write_access(self, key, caller_module):
        if caller_module is None:
            return
        if "." not in key:
            return
        module, _ = self._parse_key(key)
        if module != caller_module:
            raise ConfigAccessError(
                f"Module '{caller_module}' cannot write to '{key}'"
            )

    # ── Environment overrides ────────────────────────────────────────

    def _apply_env_overrides(self):
        """Apply config overrides from DOCSMARKDOWN_SET_CONFIG env var.

        Format: "key=value,key=value,..."
        Values are coerced to the type declared in the module schema.
        Overrides are kept in memory as defaults; the user file still wins.
        """
        raw = os.environ.get(ENV_OVERRIDES, "").strip()
        if not raw:
            return

        count = 0
        for pair in raw.split(","):
            pair = pair.strip()
            if "=" not in pair:
                continue
            key, raw_value = pair.split("=", 1)
            key = key.strip()
            value = self._coerce_value(key, raw_value.strip())
            self._defaults[key] = value
            count += 1
            log.info("Config override: %s = %r", key, value)

        if count:
            log.info("Applied %d config override(s) from %s", count, ENV_OVERRIDES)

    def _coerce_value(self, key, raw):
        """Coerce a string value to the type declared in the manifest schema."""
        schema = self._manifest.get(key, {})
        declared_type = schema.get("type", "string")

        if declared_type == "boolean":
            return raw.lower() in ("true", "1", "yes", "on")
        if declared_type == "int":
            try:
                return int(raw)
            except ValueError:
                return raw
        if declared_type == "float":
            try:
                return float(raw)
            except ValueError:
                return raw
        return raw

    # ── Key parsing ────────────────────────────────────────────────────

    def _parse_key(self, key):
        """Split a full key into (module_name, field_name).

        Uses longest-prefix match against known module names. Falls back
        to a simple first-dot split if no module name matches.
        """
        if self._module_names:
            parts = key.split(".")
            for i in range(len(parts) - 1, 0, -1):
                candidate = ".".join(parts[:i])
                if candidate in self._module_names:
                    return candidate, ".".join(parts[i:])
        return key.split(".", 1)

    # ── File I/O ───────────────────────────────────────────────────────

    def _load(self):
        """User values from the settings file, re-read only when it changes."""
        try:
            st = os.stat(self._config_path)
        except OSError:
            self._cache = None
            return {}
        stamp = (st.st_mtime_ns, st.st_size)
        if self._cache is not None and self._cache[0] == stamp:
            return dict(self._cache[1])

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                data = json.loads(strip_bom_from_string(f.read()))
        except (OSError, json.JSONDecodeError):
            log.warning("Unreadable config file, using defaults: %s",
                        self._config_path)
            return {}
        if not isinstance(data, dict):
            data = {}
        self._cache = (stamp, data)
        return dict(data)

    def _save(self, data):
        self._cache = None
        try:
            with open(self._config_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=4, sort_keys=True)
        except OSError:
            log.exception("Failed to write config: %s", self._config_path)
            raise

    # ── Module proxy factory ──────────────────────────────────────────

    def proxy_for(self, module_name):
        """Create a ModuleConfigProxy scoped to *module_name*."""
        return ModuleConfigProxy(self, module_name)


class ModuleConfigProxy:
    """Scoped config access for a single module.

    ``get("replace_smart_quotes")`` (no dot) is auto-prefixed with the
    module name -> ``"markdown.replace_smart_quotes"``.

    Cross-module reads require the full key: ``get("core.log_level")``.
    """

    __slots__ = ("_config", "_module")

    def __init__(self, config_service, module_name):
        self._config = config_service
        self._module = module_name

    def _full_key(self, key):
        if "." not in key:
            return f"{self._module}.{key}"
        return key

    def get(self, key, default=None):
        val = self._config.get(self._full_key(key), caller_module=self._module)
        return val if val is not None else default

    def set(self, key, value):
        self._config.set(self._full_key(key), value, caller_module=self._module)

    def remove(self, key):
        self._config.remove(self._full_key(key), caller_module=self._module)
