"""
Lifecycle hooks for superpowers.

The host forwards its lifecycle events to a HookManager; the extension
registers handlers that inject the bootstrap payload.

Example usage:
    from superpowers.hooks import HookContext, HookEvent, HookManager

    manager = HookManager()
    extension.install_hooks(manager)
    result = await manager.dispatch(
        HookEvent.SESSION_START,
        HookContext(
            event=HookEvent.SESSION_START,
            session_id="abc123",
            cwd=Path.cwd(),
        ),
    )
    if result.inject_message:
        session.add_custom_message(result.inject_message)
"""

from superpowers.hooks.events import (
    HookContext,
    HookEvent,
    HookResult,
)
from superpowers.hooks.manager import HookHandler, HookManager

__all__ = [
    "HookContext",
    "HookEvent",
    "HookHandler",
    "HookManager",
    "HookResult",
]
