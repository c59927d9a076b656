"""
Base classes for tools exposed to the host agent.

Tools are how the model reaches the skill library. Each tool has a name,
description, input schema, and execute method; the host registers them
with its own tool mechanism.
"""

from __future__ import annotations

import abc as _abc
import dataclasses as _dataclasses
import typing as _typing


@_dataclasses.dataclass
class ToolResult:
    """
    Result of executing a tool.

    All tools return this standardized result format.
    """

    success: bool
    output: str
    error: str | None = None

    def to_dict(self) -> dict[str, _typing.Any]:
        """Convert to JSON-serializable dict."""
        return {
            "success": self.success,
            "output": self.output,
            "error": self.error,
        }

    def to_text(self) -> str:
        """Text the host hands back to the model."""
        if self.success:
            return self.output
        return f"Error: {self.error}"


class Tool(_abc.ABC):
    """
    Abstract base class for all tools.

    Subclasses must implement:
    - name (property): The tool's identifier (used in API calls)
    - description (property): Human-readable description for the LLM
    - input_schema (property): JSON schema for input validation
    - execute(): The actual tool implementation
    """

    @property
    @_abc.abstractmethod
    def name(self) -> str:
        """Tool name (e.g., 'use_skill')."""
        ...

    @property
    @_abc.abstractmethod
    def description(self) -> str:
        """Human-readable description for the LLM."""
        ...

    @property
    @_abc.abstractmethod
    def input_schema(self) -> dict[str, _typing.Any]:
        """
        JSON schema for tool input.

        This schema is sent to the LLM to describe what parameters
        the tool accepts.
        """
        ...

    @_abc.abstractmethod
    async def execute(self, input: dict[str, _typing.Any]) -> ToolResult:
        """
        Execute the tool with the given input.

        Args:
            input: Dictionary matching the input schema

        Returns:
            ToolResult with success status, output, and optional error
        """
        ...

    @property
    def requires_permission(self) -> bool:
        """
        Whether this tool requires user permission before execution.

        Read-only tools can return False to skip the permission dialog.
        """
        return True

    def to_api_format(self) -> dict[str, _typing.Any]:
        """
        Convert to the host's tool registration format.

        The pi host takes JSON schema parameters under "parameters".
        """
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.input_schema,
        }

    def __repr__(self) -> str:
        return f"<Tool {self.name}>"

    def _require_input(
        self,
        input: dict[str, _typing.Any],
        key: str,
        *,
        label: str | None = None,
    ) -> str | ToolResult:
        """
        Get a required string input, returning an error ToolResult if missing.

        Args:
            input: The input dictionary from execute()
            key: The key to look up
            label: Human-readable name for error messages (defaults to key)

        Returns:
            The stripped input value if present and non-empty, or a ToolResult error
        """
        value = input.get(key, "")
        if not isinstance(value, str) or not value.strip():
            return ToolResult(
                success=False,
                output="",
                error=f"No {label or key} provided",
            )
        return value.strip()
