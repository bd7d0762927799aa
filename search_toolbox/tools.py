"""
Tool Registry

Registry used by agents to discover the available tools, their descriptions
and parameter schemas before any of them is executed.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class ToolDefinition:
    """Tool definition with metadata"""

    name: str
    description: str
    category: str
    parameters_schema: Dict[str, Any]
    handler: Callable
    version: str = "1.0.0"
    tags: List[str] = field(default_factory=list)
    examples: List[str] = field(default_factory=list)


class ToolRegistry:
    """Registry for managing tools"""

    def __init__(self):
        self.tools: Dict[str, ToolDefinition] = {}
        self.categories: Dict[str, List[str]] = {}

    def register_tool(self, tool_def: ToolDefinition) -> None:
        """Register a new tool"""
        if tool_def.name in self.tools:
            logger.warning("Tool %s already registered, overwriting", tool_def.name)

        self.tools[tool_def.name] = tool_def

        # Update category index
        names = self.categories.setdefault(tool_def.category, [])
        if tool_def.name not in names:
            names.append(tool_def.name)

        logger.info("Registered tool: %s (category: %s)", tool_def.name, tool_def.category)

    def unregister_tool(self, tool_name: str) -> bool:
        """Unregister a tool"""
        tool_def = self.tools.pop(tool_name, None)
        if tool_def is None:
            logger.warning("Tool %s not found", tool_name)
            return False

        names = self.categories.get(tool_def.category, [])
        if tool_name in names:
            names.remove(tool_name)
        if not names:
            self.categories.pop(tool_def.category, None)

        logger.info("Unregistered tool: %s", tool_name)
        return True

    def get_tool(self, tool_name: str) -> Optional[ToolDefinition]:
        return self.tools.get(tool_name)

    def list_tools(self, category: Optional[str] = None) -> List[ToolDefinition]:
        """List all tools or tools in a specific category"""
        if category:
            tool_names = self.categories.get(category, [])
            return [self.tools[name] for name in tool_names if name in self.tools]
        return list(self.tools.values())

    def list_categories(self) -> List[str]:
        return list(self.categories.keys())

    def search_tools(self, query: str) -> List[ToolDefinition]:
        """Search tools by name, description, or tags"""
        query_lower = query.lower()
        return [
            tool
            for tool in self.tools.values()
            if query_lower in tool.name.lower()
            or query_lower in tool.description.lower()
            or any(query_lower in tag.lower() for tag in tool.tags)
        ]

    def get_tool_info(self, tool_name: str) -> Optional[Dict[str, Any]]:
        """Get detailed information about a tool"""
        tool = self.get_tool(tool_name)
        if not tool:
            return None

        return {
            "name": tool.name,
            "description": tool.description,
            "category": tool.category,
            "version": tool.version,
            "tags": tool.tags,
            "examples": tool.examples,
            "parameters_schema": tool.parameters_schema,
        }


# Global tool registry instance
_tool_registry = ToolRegistry()


def get_tool_registry() -> ToolRegistry:
    """Get the global tool registry"""
    return _tool_registry

