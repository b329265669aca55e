"""Core module: provides config and events."""

import logging

from docsmarkdown.framework.module_base import ModuleBase

log = logging.getLogger("docsmarkdown.core")


class Module(ModuleBase):

    def initialize(self, services):
        from docsmarkdown.modules.core.services.config import ConfigService
        from docsmarkdown.modules.core.services.events import EventBusService

        if "config" not in services:
            services.register(ConfigService())
        services.register(EventBusService())
        services.config.set_events(services.events)
        services.events.subscribe("config:changed", self._on_config_changed)

    def _on_config_changed(self, key=None, value=None, **_):
        if key == "core.log_level":
            from docsmarkdown.framework.logging import set_log_level
            set_log_level(value)
            log.info("Log level set to %s", value)
