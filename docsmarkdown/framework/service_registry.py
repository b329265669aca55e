"""Named service container handed to modules and commands."""

import logging

log = logging.getLogger("docsmarkdown.services")


class ServiceRegistry:
    """Holds the running services, reachable by name or attribute.

    Usage::

        services = ServiceRegistry()
        services.register(ConfigService())
        services.register_instance("commands", command_registry)

        services.config.get("markdown.replace_smart_quotes")
        services.get("events")   # None when absent
    """

    def __init__(self):
        self._services = {}

    def register(self, service):
        """Register a ServiceBase instance under its ``name``."""
        if service.name is None:
            raise ValueError(f"Service {type(service).__name__} has no name")
        self.register_instance(service.name, service)

    def register_instance(self, name, instance):
        """Register any object (a registry, a host handle) as *name*."""
        if name in self._services:
            raise ValueError(f"Service already registered: {name}")
        self._services[name] = instance
        log.debug("Service registered: %s (%s)", name, type(instance).__name__)

    def get(self, name):
        return self._services.get(name)

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._services[name]
        except KeyError:
            raise AttributeError(f"No service registered: {name}") from None

    def __contains__(self, name):
        return name in self._services

    def initialize_all(self, host):
        """Hand *host* to every service with an ``initialize`` hook, in
        registration order."""
        for name, svc in self._services.items():
            init = getattr(svc, "initialize", None)
            if callable(init):
                init(host)
                log.debug("Service initialized: %s", name)

    def shutdown_all(self):
        """Shut services down newest first; failures are logged, not raised."""
        for name, svc in reversed(list(self._services.items())):
            shutdown = getattr(svc, "shutdown", None)
            if not callable(shutdown):
                continue
            try:
                shutdown()
            except Exception:
                log.exception("Error shutting down service: %s", name)

    @property
    def service_names(self):
        return list(self._services)
