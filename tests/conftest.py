"""Shared fixtures for the report pipeline."""

from typing import Optional

import pytest
from langchain_core.messages import AIMessage

from src.application.agent.graph import build_agent_graph
from src.application.services.prompt_loader import PromptLoader
from src.application.use_cases.financial_analysis_report import FinancialAnalysisReportUseCase
from src.domain.ports.prompt_store_port import IPromptStore
from src.infrastructure.company_data.mock_company_data_provider import MockCompanyDataProvider
from src.infrastructure.entrypoints.tool_registry import create_tools
from src.infrastructure.prompts.file_prompt_store import FilePromptStore
from tests.fakes import ScriptedChatModel


@pytest.fixture
def tools():
    return create_tools(MockCompanyDataProvider())


@pytest.fixture
def make_report_use_case(tools):
    """Build a report use case around scripted model replies and the bundled prompts."""

    def _make(responses: list[AIMessage], store: Optional[IPromptStore] = None):
        llm = ScriptedChatModel(responses)
        graph = build_agent_graph(llm, tools)
        prompts = PromptLoader(store or FilePromptStore())
        return FinancialAnalysisReportUseCase(graph, prompts), llm

    return _make
