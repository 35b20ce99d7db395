"""
Use-case: generate a markdown financial analysis report for a company.
langchain_core.messages is treated as framework (not infrastructure) because
LangGraph is the orchestration framework used throughout the application layer.
"""

import logging
from typing import Any, Optional

from langchain_core.messages import HumanMessage, SystemMessage

from src.application.services.prompt_loader import PromptLoader
from src.domain.exceptions import ReportGenerationError
from src.domain.ports.observability_port import IObservabilityHandler

SYSTEM_PROMPT_PATH = "financial-analysis-system.txt"
USER_PROMPT_PATH = "financial-analysis-user.txt"

logger = logging.getLogger(__name__)


class FinancialAnalysisReportUseCase:
    def __init__(
        self,
        graph: Any,
        prompts: PromptLoader,
        observability: Optional[IObservabilityHandler] = None,
        recursion_limit: int = 10,
    ) -> None:
        """
        Args:
            graph:           Compiled LangGraph StateGraph returned by build_agent_graph().
            prompts:         Shared PromptLoader holding the template cache.
            observability:   IObservabilityHandler implementation, or None to disable tracing.
            recursion_limit: Maximum number of graph steps for one report.
        """
        self._graph = graph
        self._prompts = prompts
        self._observability = observability
        self._recursion_limit = recursion_limit

    @property
    def observability(self) -> Optional[IObservabilityHandler]:
        return self._observability

    def execute(self, company_name: Optional[str]) -> str:
        """Run the agent for *company_name* and return the report text.

        The company name is substituted into the user prompt as-is.

        Raises:
            PromptLoadError:       if a prompt template cannot be read.
            ValueError:            if *company_name* is None.
            ReportGenerationError: if the model's final message has no text.
        """
        system_prompt = self._prompts.load(SYSTEM_PROMPT_PATH)
        user_prompt = self._prompts.render(USER_PROMPT_PATH, {"companyName": company_name})

        config: dict[str, Any] = {"recursion_limit": self._recursion_limit}
        if self._observability is not None:
            config["callbacks"] = [self._observability.as_callback()]
            config["metadata"] = self._observability.run_metadata(company_name)

        logger.info("Generating financial analysis report — company=%s", company_name)
        final_state = self._graph.invoke(
            {"messages": [SystemMessage(content=system_prompt), HumanMessage(content=user_prompt)]},
            config=config,
        )
        report = _message_text(final_state["messages"][-1])
        if not report:
            raise ReportGenerationError(
                f"Model returned no report content for company: {company_name!r}"
            )
        return report


def _message_text(message: Any) -> str:
    """Flatten a message's content to plain text (string or list of content blocks)."""
    content = getattr(message, "content", None)
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)
