"""
Tool-call helpers shared by the sync and async tool conversations.
"""

import logging
from typing import Any, Dict, Iterator, List, NamedTuple, Optional, Sequence

from .builders import build_tool_response_message
from .types import Tool

logger = logging.getLogger(__name__)


class ToolInvocation(NamedTuple):
    """A tool call from the model matched to a local tool."""

    tool: Tool
    tool_call_id: str
    function_name: str
    arguments: str

    def response_message(self, result: str) -> Dict[str, Any]:
        return build_tool_response_message(self.tool_call_id, self.function_name, result)


def first_choice_message(response: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """The ``message`` of the first choice, or None."""
    if not response:
        return None
    choices = response.get("choices") or []
    if not choices:
        return None
    return choices[0].get("message")


def get_tool_calls(message: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
    if not message:
        return []
    return message.get("tool_calls") or []


def find_tool(tools: Sequence[Tool], function_name: str) -> Optional[Tool]:
    """First tool registered under ``function_name``."""
    return next((t for t in tools if t.function.name == function_name), None)


def match_tool_calls(
    tool_calls: Sequence[Dict[str, Any]], tools: Sequence[Tool]
) -> Iterator[ToolInvocation]:
    """
    Pair each tool call with the tool it names.

    Calls that are incomplete or name no registered tool are skipped and
    logged; they never fail the conversation.
    """
    for call in tool_calls:
        function = call.get("function") or {}
        function_name = function.get("name")
        arguments = function.get("arguments")
        tool_call_id = call.get("id")

        if not function_name or not arguments or tool_call_id is None:
            logger.warning("Skipping incomplete tool call: %r", call)
            continue

        tool = find_tool(tools, function_name)
        if tool is None:
            logger.warning(
                "Skipping tool call %s: no tool named %r is registered",
                tool_call_id,
                function_name,
            )
            continue

        yield ToolInvocation(tool, tool_call_id, function_name, arguments)
