"""
Hook manager - central coordinator for lifecycle handlers.

The HookManager keeps the handlers registered per event and dispatches
events to them in registration order. A failing handler is logged and
skipped; it never interrupts the host session.
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import superpowers.hooks.events as events

_logger = _logging.getLogger(__name__)

HookHandler = _typing.Callable[[events.HookContext], _typing.Awaitable[events.HookResult]]


class HookManager:
    """
    Central manager for hook execution.

    Handlers for an event run sequentially in registration order. Injected
    messages from all handlers are combined, in order, into one result.
    """

    def __init__(self) -> None:
        """Initialize a manager with no handlers."""
        self._handlers: dict[events.HookEvent, list[tuple[str, HookHandler]]] = {}

    def register(
        self,
        event: events.HookEvent,
        handler: HookHandler,
        *,
        name: str | None = None,
    ) -> None:
        """
        Register a handler for an event.

        Args:
            event: Event to handle.
            handler: Async callable taking the hook context.
            name: Name used in log messages (defaults to the handler's name).
        """
        handler_name = name or getattr(handler, "__name__", repr(handler))
        self._handlers.setdefault(event, []).append((handler_name, handler))

    async def dispatch(
        self,
        event: events.HookEvent,
        context: events.HookContext,
    ) -> events.HookResult:
        """
        Dispatch an event to all registered handlers.

        Args:
            event: The event being dispatched.
            context: Context for the event.

        Returns:
            Combined result. Handlers that raised contribute nothing.
        """
        messages: list[str] = []

        for handler_name, handler in self._handlers.get(event, []):
            try:
                result = await handler(context)
            except Exception as e:
                _logger.warning(
                    "Hook %s failed on %s: %s",
                    handler_name,
                    event.value,
                    e,
                )
                # Hook errors never block the session - continue
                continue

            if result.inject_message:
                messages.append(result.inject_message)

        if not messages:
            return events.HookResult.continue_()
        return events.HookResult.inject("\n\n".join(messages))

    def get_hooks_for_event(self, event: events.HookEvent) -> list[str]:
        """Get the names of handlers registered for an event."""
        return [name for name, _ in self._handlers.get(event, [])]

    def has_hooks_for_event(self, event: events.HookEvent) -> bool:
        """Check if any handlers are registered for an event."""
        return bool(self._handlers.get(event))
