"""Docs Markdown framework: base classes, registries, event bus."""

from docsmarkdown.framework.module_base import ModuleBase
from docsmarkdown.framework.command_base import CommandBase
from docsmarkdown.framework.command_context import CommandContext
from docsmarkdown.framework.service_base import ServiceBase
from docsmarkdown.framework.service_registry import ServiceRegistry
from docsmarkdown.framework.command_registry import CommandRegistry
from docsmarkdown.framework.event_bus import EventBus

__all__ = [
    "ModuleBase",
    "CommandBase",
    "CommandContext",
    "ServiceBase",
    "ServiceRegistry",
    "CommandRegistry",
    "EventBus",
]
