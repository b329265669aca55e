"""Docs Markdown entry point: bootstraps the module framework.

Responsibilities:
1. Resolve module load order from the dependency graph (_manifest.py)
2. Initialize core services first, then all other modules
3. Auto-discover commands from each module's commands/ subpackage
4. Route host notifications (document changes) onto the event bus

A host adapter calls ``bootstrap()`` once, then ``execute_command()`` for
menu/shortcut actions and ``document_changed()`` on every text change.
"""

import logging
import os
import threading

from docsmarkdown.framework.command_context import CommandContext
from docsmarkdown.framework.logging import setup_logging

log = logging.getLogger("docsmarkdown.main")

# ── Singleton registries ──────────────────────────────────────────────

_services = None
_commands = None
_modules = []
_init_lock = threading.Lock()
_initialized = False


def _load_manifest():
    """Load the module manifest.

    Returns a list of module descriptors sorted by dependency order.
    Each descriptor is a dict with keys: name, requires, config, ...
    """
    try:
        from docsmarkdown._manifest import MODULES
        return _topo_sort(MODULES)
    except ImportError:
        log.warning("_manifest.py not found, using fallback discovery")
        return _fallback_discover_modules()


def _fallback_discover_modules(modules_dir=None):
    """Discover modules by scanning modules/ for module.yaml files."""
    import yaml

    modules_dir = modules_dir or os.path.join(os.path.dirname(__file__), "modules")
    if not os.path.isdir(modules_dir):
        return []

    result = []
    for entry in sorted(os.listdir(modules_dir)):
        yaml_path = os.path.join(modules_dir, entry, "module.yaml")
        if not os.path.isfile(yaml_path):
            continue
        try:
            with open(yaml_path, encoding="utf-8") as f:
                manifest = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError):
            log.exception("Failed to load %s", yaml_path)
            continue
        manifest.setdefault("name", entry)
        result.append(manifest)

    return _topo_sort(result)


def _topo_sort(modules):
    """Topological sort of modules by 'requires' dependencies.

    Ensures core is always first. Returns sorted list.
    """
    by_name = {m["name"]: m for m in modules}
    provides = {}
    for m in modules:
        for svc in m.get("provides_services", []):
            provides[svc] = m["name"]

    visited = set()
    order = []

    def visit(name):
        if name in visited:
            return
        visited.add(name)
        m = by_name.get(name)
        if m is None:
            return
        for req in m.get("requires", []):
            provider = provides.get(req, req)
            if provider in by_name:
                visit(provider)
        order.append(m)

    if "core" in by_name:
        visit("core")
    for name in by_name:
        visit(name)

    return order


def _import_module_class(module_manifest):
    """Import and return the ModuleBase subclass for a module."""
    import importlib

    from docsmarkdown.framework.module_base import ModuleBase

    name = module_manifest["name"]
    package = "docsmarkdown.modules.%s" % name
    try:
        mod = importlib.import_module(package)
    except ImportError:
        log.exception("Failed to import module: %s", name)
        return None

    for attr in dir(mod):
        obj = getattr(mod, attr)
        if (isinstance(obj, type) and issubclass(obj, ModuleBase)
                and obj is not ModuleBase):
            return obj
    return None


def get_services():
    """Return the global ServiceRegistry (lazy-init)."""
    if _services is None:
        bootstrap()
    return _services


def get_commands():
    """Return the global CommandRegistry (lazy-init)."""
    if _commands is None:
        bootstrap()
    return _commands


def bootstrap(host=None, config_path=None, log_path=None):
    """Initialize the entire framework.

    Idempotent, safe to call multiple times.

    Args:
        host:        Host editor object handed to services' ``initialize``.
        config_path: JSON settings file (default ~/.docsmarkdown.json).
        log_path:    Log file (default ~/docsmarkdown.log).
    """
    global _services, _commands, _modules, _initialized

    if _initialized:
        return

    with _init_lock:
        if _initialized:
            return

        from docsmarkdown.framework.service_registry import ServiceRegistry
        from docsmarkdown.framework.command_registry import CommandRegistry
        from docsmarkdown.modules.core.services.config import ConfigService

        _services = ServiceRegistry()
        _commands = CommandRegistry(_services)
        _services.register_instance("commands", _commands)
        _services.register(ConfigService(config_path))

        manifests = _load_manifest()
        manifest_dict = {m["name"]: m for m in manifests}
        _services.config.set_manifest(manifest_dict)
        log.info("Config defaults loaded for %d modules", len(manifest_dict))

        setup_logging(_services.config.get("core.log_level") or "WARN", log_path)

        _modules = []
        for manifest in manifests:
            name = manifest["name"]
            cls = _import_module_class(manifest)
            if cls is None:
                log.warning("Skipping module with no class: %s", name)
                continue

            instance = cls()
            instance.name = name

            try:
                instance.initialize(_services)
                log.info("Module initialized: %s", name)
            except Exception:
                log.exception("Failed to initialize module: %s", name)
                continue

            _modules.append(instance)

            commands_dir = os.path.join(
                os.path.dirname(__file__), "modules", name, "commands")
            if os.path.isdir(commands_dir):
                _commands.discover(commands_dir, "docsmarkdown.modules.%s.commands" % name)

        _services.initialize_all(host)

        _initialized = True
        log.info("Framework bootstrap complete: %d modules, %d commands",
                 len(_modules), len(_commands))


def shutdown():
    """Shut down all modules and services."""
    global _services, _commands, _modules, _initialized

    for mod in reversed(_modules):
        try:
            mod.shutdown()
        except Exception:
            log.exception("Error shutting down module: %s", mod.name)

    if _services:
        _services.shutdown_all()

    _services = None
    _commands = None
    _modules = []
    _initialized = False


# ── Host entry points ─────────────────────────────────────────────────


def make_context(editor, prompts, workspace, notifier, caller="menu"):
    """Build a CommandContext bound to the global services."""
    return CommandContext(
        editor=editor,
        prompts=prompts,
        workspace=workspace,
        notifier=notifier,
        services=get_services(),
        caller=caller,
    )


def execute_command(name, ctx, **kwargs):
    """Run the command *name* (see CommandRegistry.execute)."""
    log.info("Command requested: %s (caller=%s)", name, ctx.caller)
    return get_commands().execute(name, ctx, **kwargs)


def document_changed(event, editor):
    """Forward a host text-change notification to subscribers.

    Args:
        event:  Object with a ``document`` attribute (the changed document).
        editor: The active TextEditor, or None.
    """
    handled = get_services().events.emit("document:changed", event=event, editor=editor)
    log.debug("document:changed delivered to %d subscriber(s)", handled)
    return event
