"""
Hook event types, context, and result dataclasses.

These define the data passed between the host's lifecycle events and the
extension's handlers:
- HookEvent: Lifecycle events the extension responds to
- HookContext: Data passed to handlers about the current session
- HookResult: What a handler returns (optionally a message to inject)
"""

from __future__ import annotations

import dataclasses as _dataclasses
import enum as _enum
import json as _json
import pathlib as _pathlib
import typing as _typing


class HookEvent(_enum.Enum):
    """
    Host lifecycle events that can trigger hooks.

    Values match the host's event names.
    """

    SESSION_START = "session_start"
    """New session begins."""

    PRE_COMPACT = "session_before_compact"
    """Before the context window is compacted."""


@_dataclasses.dataclass
class HookContext:
    """
    Context passed to hooks about the current state.

    Attributes:
        event: The event that triggered this hook
        session_id: Current session identifier
        cwd: Current working directory
    """

    event: HookEvent
    session_id: str
    cwd: _pathlib.Path

    def to_dict(self) -> dict[str, _typing.Any]:
        """Convert to JSON-serializable dict."""
        return {
            "event": self.event.value,
            "session_id": self.session_id,
            "cwd": str(self.cwd),
        }

    def to_json(self) -> str:
        """Serialize to JSON string."""
        return _json.dumps(self.to_dict())


@_dataclasses.dataclass
class HookResult:
    """
    Result returned by a hook after execution.

    Attributes:
        inject_message: Text to add to the conversation as a user-role
            custom message, or None to inject nothing.
    """

    inject_message: str | None = None

    @classmethod
    def continue_(cls) -> HookResult:
        """Create a result that injects nothing."""
        return cls()

    @classmethod
    def inject(cls, message: str) -> HookResult:
        """Create a result that injects a message."""
        return cls(inject_message=message)

    def to_dict(self) -> dict[str, _typing.Any]:
        """Convert to JSON-serializable dict."""
        result: dict[str, _typing.Any] = {}
        if self.inject_message is not None:
            result["inject_message"] = self.inject_message
        return result
