"""Synchronous publish/subscribe bus shared by modules and the host adapter."""

import logging
import weakref

log = logging.getLogger("docsmarkdown.events")


class _Subscription:
    """A callback, held strongly or through a WeakMethod."""

    __slots__ = ("_target", "weak")

    def __init__(self, callback, on_dead=None):
        self.weak = on_dead is not None and hasattr(callback, "__self__")
        if self.weak:
            self._target = weakref.WeakMethod(callback, on_dead)
        else:
            self._target = callback

    def callback(self):
        """The live callable, or None once a weak target was collected."""
        return self._target() if self.weak else self._target

    def holds(self, ref):
        return self._target is ref


class EventBus:
    """Named events delivered to subscribers on the emitting thread.

    A failing subscriber is logged and skipped; the emitter and the
    remaining subscribers are unaffected.

    Usage::

        bus = EventBus()
        bus.subscribe("document:changed", module.on_document_changed, weak=True)
        bus.emit("document:changed", event=event, editor=editor)

    Events used by the built-in modules:

    - ``document:changed`` (event, editor)
    - ``config:changed`` (key, value, old_value)
    - ``command:executing`` / ``command:completed`` / ``command:failed``
    """

    def __init__(self):
        self._subscribers = {}

    def subscribe(self, topic, callback, weak=False):
        """Call *callback* with the keyword payload whenever *topic* fires.

        With ``weak=True`` a bound method does not keep its instance alive;
        the subscription disappears when the instance is collected.
        """
        on_dead = (lambda ref: self._drop_ref(topic, ref)) if weak else None
        self._subscribers.setdefault(topic, []).append(_Subscription(callback, on_dead))

    def unsubscribe(self, topic, callback):
        subs = self._subscribers.get(topic)
        if subs:
            self._subscribers[topic] = [s for s in subs if s.callback() != callback]

    def emit(self, topic, /, **data):
        """Deliver *topic* and return how many subscribers ran without error."""
        delivered = 0
        for sub in list(self._subscribers.get(topic, ())):
            callback = sub.callback()
            if callback is None:
                continue
            try:
                callback(**data)
            except Exception:
                log.exception("Error in event handler for %s", topic)
            else:
                delivered += 1
        return delivered

    def has_subscribers(self, topic):
        return any(s.callback() is not None for s in self._subscribers.get(topic, ()))

    def _drop_ref(self, topic, ref):
        subs = self._subscribers.get(topic)
        if subs:
            self._subscribers[topic] = [s for s in subs if not s.holds(ref)]
