"""Markdown module: authoring commands and smart-quote cleanup."""

import logging

from docsmarkdown.framework.module_base import ModuleBase

log = logging.getLogger("docsmarkdown.markdown")


class MarkdownModule(ModuleBase):
    """Wires the smart-quote normalizer to document change notifications.

    The insert/format commands are discovered from ``commands/``.
    """

    def initialize(self, services):
        self.services = services
        self._config = services.config.proxy_for(self.name or "markdown")
        services.events.subscribe("document:changed", self.on_document_changed)
        log.info("Smart-quote cleanup subscribed to document:changed")

    def on_document_changed(self, event=None, editor=None, **_):
        from docsmarkdown.modules.markdown.smart_quotes import replace_smart_quotes

        enabled = bool(self._config.get("replace_smart_quotes", False))
        replace_smart_quotes(event, editor, enabled)

    def shutdown(self):
        services = getattr(self, "services", None)
        if services is not None and "events" in services:
            services.events.unsubscribe("document:changed", self.on_document_changed)
