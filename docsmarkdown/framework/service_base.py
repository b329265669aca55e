"""Base class for all services."""

from abc import ABC


class ServiceBase(ABC):
    """Abstract base for services registered in the ServiceRegistry.

    Services provide horizontal capabilities (config access, events,
    etc.) that modules and commands consume.

    Attributes:
        name: Unique service identifier (e.g. "config", "events").
    """

    name: str = None

    def initialize(self, host):
        """Called once during bootstrap with the host object (may be None).

        Override to perform setup that needs the host editor.
        """

    def shutdown(self):
        """Called on unload. Override to clean up."""
