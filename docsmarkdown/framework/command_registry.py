"""Central command registry with auto-discovery and unified execution."""

import importlib
import inspect
import logging
import os
import pkgutil

from docsmarkdown.framework.command_base import CommandBase

log = logging.getLogger("docsmarkdown.commands")


class CommandRegistry:
    """Discovers, registers, and dispatches commands.

    Commands are auto-discovered from each module's ``commands/``
    subpackage and registered here. Menus, shortcuts and tests all go
    through ``execute``.
    """

    def __init__(self, services):
        self._services = services
        self._commands = {}  # name -> CommandBase instance

    # ── Registration ──────────────────────────────────────────────────

    def register(self, command):
        """Register a single CommandBase instance."""
        if command.name in self._commands:
            log.warning("Command already registered, replacing: %s", command.name)
        self._commands[command.name] = command

    def register_many(self, commands):
        for c in commands:
            self.register(c)

    def discover(self, package_path, package_name):
        """Auto-discover CommandBase subclasses in a package directory.

        Args:
            package_path: Filesystem path to the package directory.
            package_name: Dotted Python package name
                          (e.g. "docsmarkdown.modules.markdown.commands").
        """
        if not os.path.isdir(package_path):
            return

        count = 0
        for _importer, modname, _ispkg in pkgutil.iter_modules([package_path]):
            if modname.startswith("_"):
                continue
            fqn = f"{package_name}.{modname}"
            try:
                mod = importlib.import_module(fqn)
            except Exception:
                log.exception("Failed to import command module: %s", fqn)
                continue

            for _attr_name, obj in inspect.getmembers(mod, inspect.isclass):
                if (
                    issubclass(obj, CommandBase)
                    and obj is not CommandBase
                    and obj.__module__ == mod.__name__
                    and getattr(obj, "name", None)
                ):
                    try:
                        self.register(obj())
                        count += 1
                    except Exception:
                        log.exception("Failed to instantiate command: %s", obj)

        if count:
            log.info("Discovered %d commands from %s", count, package_name)

    # ── Lookup ────────────────────────────────────────────────────────

    def get(self, name):
        """Get a command by name, or None."""
        return self._commands.get(name)

    def commands_for_doc_type(self, doc_type):
        """Yield commands usable on *doc_type* (language id)."""
        for command in self._commands.values():
            if command.doc_types is None or doc_type in command.doc_types:
                yield command

    # ── Execution ─────────────────────────────────────────────────────

    def execute(self, command_name, ctx, **kwargs):
        """Execute a command by name.

        Args:
            command_name: Registered command name.
            ctx:          CommandContext for this invocation.
            **kwargs:     Command arguments.

        Returns:
            dict result from the command.

        Raises:
            KeyError:     Command not found.
            ValueError:   Document type incompatible.
        """
        command = self._commands.get(command_name)
        if command is None:
            raise KeyError(f"Unknown command: {command_name}")

        if command.doc_types and ctx.doc_type and ctx.doc_type not in command.doc_types:
            raise ValueError(
                f"Command {command_name} does not support doc_type={ctx.doc_type}"
            )

        ok, err = command.validate(**kwargs)
        if not ok:
            return {"status": "error", "error": err}

        bus = self._services.get("events")
        if bus:
            bus.emit("command:executing", name=command_name, caller=ctx.caller)

        try:
            result = command.execute(ctx, **kwargs)
        except Exception as exc:
            log.exception("Command execution failed: %s", command_name)
            if bus:
                bus.emit("command:failed", name=command_name, error=str(exc),
                         caller=ctx.caller)
            return {"status": "error", "error": str(exc)}

        if bus:
            bus.emit("command:completed", name=command_name,
                     status=result.get("status"), caller=ctx.caller)

        return result

    @property
    def command_names(self):
        return list(self._commands.keys())

    def __len__(self):
        return len(self._commands)
