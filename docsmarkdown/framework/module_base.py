"""Base class for all modules."""

from abc import ABC


class ModuleBase(ABC):
    """Base class for all Docs Markdown modules.

    Modules declare their manifest in _manifest.py (config, requires,
    provides_services, commands). This class handles the runtime
    behavior: initialization, event wiring, and shutdown.

    The ``name`` attribute is set automatically from the manifest at load
    time; it does NOT need to be set in the subclass.
    """

    name: str = None

    def initialize(self, services):
        """Called in dependency order during bootstrap.

        Use this to register services, wire event subscriptions, and
        create internal objects. Services of modules loaded earlier are
        available.

        Args:
            services: ServiceRegistry with attribute access to all
                      registered services (services.config, services.events …).
        """

    def shutdown(self):
        """Drop subscriptions and release resources.

        Called in reverse dependency order when the host unloads."""
