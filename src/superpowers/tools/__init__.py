"""
Tools exposed to the host agent.

Usage:
    from superpowers.tools import UseSkillTool

    tool = UseSkillTool(skill_loader)
    result = await tool.execute({"skill_name": "superpowers:brainstorming"})
"""

from superpowers.tools.base import Tool, ToolResult
from superpowers.tools.skill import UseSkillTool

__all__ = [
    "Tool",
    "ToolResult",
    "UseSkillTool",
]
