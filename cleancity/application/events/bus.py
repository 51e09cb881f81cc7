"""In-process publish/subscribe bus for domain events.

Handlers run synchronously, in the order they subscribed, every time their
event type is emitted. A failing handler is logged and skipped so its
siblings still run and the emitter never sees the error. Handlers that
return an awaitable are scheduled and not awaited.

The bus holds no global state; the application builds one instance in its
composition root and hands it to whoever needs it.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections import defaultdict
from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from anyio import from_thread

logger = logging.getLogger(__name__)

EventHandler = Callable[[Any], Any]


def _event_key(event_type: Any) -> str:
    return str(getattr(event_type, "value", event_type))


def _mark_removed(listeners: Iterable["_Listener"]) -> None:
    for listener in listeners:
        listener.removed = True


class _Listener:
    __slots__ = ("handler", "once", "removed")

    def __init__(self, handler: EventHandler, *, once: bool = False) -> None:
        self.handler = handler
        self.once = once
        self.removed = False


class Subscription:
    """Handle returned by :meth:`EventBus.subscribe`.

    ``unsubscribe`` removes exactly the registration that produced this
    handle. Calling it again does nothing.
    """

    def __init__(self, bus: "EventBus", event_type: str, listener: _Listener) -> None:
        self._bus = bus
        self._event_type = event_type
        self._listener = listener
        self._active = True

    @property
    def event_type(self) -> str:
        return self._event_type

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        if not self._active:
            return
        self._active = False
        self._bus._remove(self._event_type, self._listener)


class EventBus:
    """Map event types to ordered lists of handlers."""

    def __init__(self) -> None:
        self._listeners: defaultdict[str, list[_Listener]] = defaultdict(list)
        self._pending: set[asyncio.Task[Any]] = set()

    def subscribe(self, event_type: Any, handler: EventHandler) -> Subscription:
        """Register ``handler`` for ``event_type`` and return its handle."""

        return self._add(_event_key(event_type), _Listener(handler))

    def subscribe_once(self, event_type: Any, handler: EventHandler) -> Subscription:
        """Register ``handler`` so it is removed on its first invocation."""

        return self._add(_event_key(event_type), _Listener(handler, once=True))

    def emit(self, event_type: Any, payload: Any) -> None:
        """Invoke every handler currently registered for ``event_type``."""

        key = _event_key(event_type)
        listeners = list(self._listeners.get(key, ()))
        if not listeners:
            logger.debug("No handlers for event %s", key)
            return

        logger.debug("Emitting %s to %d handler(s)", key, len(listeners))
        for listener in listeners:
            # Unsubscribed by an earlier handler of this emit.
            if listener.removed:
                continue
            if listener.once:
                if not self._remove(key, listener):
                    continue
            try:
                result = listener.handler(payload)
            except Exception:
                logger.exception("Handler error for event %s", key)
                continue
            if inspect.isawaitable(result):
                self._schedule(key, result)

    def clear_listeners(self, event_type: Any | None = None) -> None:
        """Remove the handlers of ``event_type``, or of every event when omitted."""

        if event_type is None:
            for listeners in self._listeners.values():
                _mark_removed(listeners)
            self._listeners.clear()
            logger.debug("Cleared all listeners")
            return
        key = _event_key(event_type)
        _mark_removed(self._listeners.pop(key, ()))
        logger.debug("Cleared listeners for %s", key)

    def clear_all(self) -> None:
        """Remove every handler of every event type."""

        self.clear_listeners()

    def listener_count(self, event_type: Any) -> int:
        return len(self._listeners.get(_event_key(event_type), ()))

    def active_events(self) -> list[str]:
        """Return the event types that currently have at least one handler."""

        return [key for key, listeners in self._listeners.items() if listeners]

    def _add(self, key: str, listener: _Listener) -> Subscription:
        self._listeners[key].append(listener)
        logger.debug(
            "Subscribed to %s (%d listeners)", key, len(self._listeners[key])
        )
        return Subscription(self, key, listener)

    def _remove(self, key: str, listener: _Listener) -> bool:
        listeners = self._listeners.get(key)
        if not listeners:
            return False
        for index, candidate in enumerate(listeners):
            if candidate is listener:
                listener.removed = True
                del listeners[index]
                if not listeners:
                    self._listeners.pop(key, None)
                logger.debug("Unsubscribed from %s (%d listeners)", key, len(listeners))
                return True
        return False

    def _schedule(self, key: str, awaitable: Awaitable[Any]) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            try:
                from_thread.run_sync(self._spawn, key, awaitable)
            except RuntimeError:
                # Not inside an event loop nor an anyio worker thread.
                asyncio.run(self._await_handler(key, awaitable))
        else:
            self._spawn(key, awaitable, loop)

    def _spawn(
        self,
        key: str,
        awaitable: Awaitable[Any],
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        loop = loop or asyncio.get_running_loop()
        task = loop.create_task(self._await_handler(key, awaitable))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    @staticmethod
    async def _await_handler(key: str, awaitable: Awaitable[Any]) -> None:
        try:
            await awaitable
        except Exception:
            logger.exception("Async handler error for event %s", key)


__all__ = ["EventBus", "EventHandler", "Subscription"]
