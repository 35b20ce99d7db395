"""
LangGraph ReAct loop that lets the chat model call the company data tools.

Dependency-injection contract:
  - Receives an IChatModel and the tool descriptors from create_tools().
  - Never imports ChatBedrock or langfuse directly.
  - The system prompt arrives as the first input message; the graph holds no prompt.
  - Tool results are sent back to the model as JSON.
"""

import json
import logging
from typing import Annotated, TypedDict

from langchain_core.messages import ToolMessage
from langgraph.graph import END, START, StateGraph
from langgraph.graph.message import add_messages

from src.domain.ports.chat_model_port import IChatModel

logger = logging.getLogger(__name__)


class ReportState(TypedDict):
    """Conversation for one report: system prompt, user prompt, then model and tool turns."""

    messages: Annotated[list, add_messages]


def build_agent_graph(llm: IChatModel, tools: list):
    """Build and compile the report agent graph.

    Args:
        llm:   IChatModel implementation — injected, no direct SDK reference.
        tools: LangChain tools from tool_registry.create_tools().

    Returns:
        Compiled LangGraph graph; invoke() it with {"messages": [...]}.
    """
    tools_by_name = {t.name: t for t in tools}
    llm_with_tools = llm.bind_tools(tools)

    def model_turn(state: ReportState) -> dict:
        return {"messages": [llm_with_tools.invoke(state["messages"])]}

    def tool_turn(state: ReportState) -> dict:
        """Run every tool call on the last model message, in order."""
        results: list[ToolMessage] = []
        for tool_call in state["messages"][-1].tool_calls:
            logger.info("Tool call — name=%s args=%s", tool_call["name"], tool_call["args"])
            output = tools_by_name[tool_call["name"]].invoke(tool_call["args"])
            results.append(
                ToolMessage(content=json.dumps(output), tool_call_id=tool_call["id"])
            )
        return {"messages": results}

    def next_turn(state: ReportState) -> str:
        if getattr(state["messages"][-1], "tool_calls", None):
            return "tool_turn"
        return END

    workflow = StateGraph(ReportState)
    workflow.add_node("model_turn", model_turn)
    workflow.add_node("tool_turn", tool_turn)
    workflow.add_edge(START, "model_turn")
    workflow.add_conditional_edges("model_turn", next_turn, ["tool_turn", END])
    workflow.add_edge("tool_turn", "model_turn")
    return workflow.compile()
