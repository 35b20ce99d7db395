"""
FastAPI entry point — HTTP server.

This module is the Composition Root: build_report_use_case() wires all
infrastructure adapters once and passes them to the application layer.
create_app() accepts a pre-built use case so tests can inject a stubbed model.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:create_app --factory --reload --port 8000
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from src.application.agent.graph import build_agent_graph
from src.application.services.prompt_loader import PromptLoader
from src.application.use_cases.financial_analysis_report import FinancialAnalysisReportUseCase
from src.domain.ports.observability_port import IObservabilityHandler
from src.infrastructure.company_data.mock_company_data_provider import MockCompanyDataProvider
from src.infrastructure.config import Settings
from src.infrastructure.entrypoints.tool_registry import create_tools
from src.infrastructure.llm.bedrock_adapter import BedrockChatAdapter
from src.infrastructure.prompts.file_prompt_store import FilePromptStore

logger = logging.getLogger(__name__)


class MarkdownResponse(PlainTextResponse):
    media_type = "text/markdown"


def build_report_use_case(settings: Settings) -> FinancialAnalysisReportUseCase:
    """Wire the production adapters into a FinancialAnalysisReportUseCase."""
    observability: Optional[IObservabilityHandler] = None
    if settings.tracing_enabled:
        from src.infrastructure.observability.langfuse_adapter import LangfuseObservabilityHandler
        observability = LangfuseObservabilityHandler()

    prompts = PromptLoader(FilePromptStore())
    tools = create_tools(MockCompanyDataProvider())
    graph = build_agent_graph(BedrockChatAdapter(settings), tools)
    logger.info(
        "Report use case wired — model=%s region=%s tracing=%s",
        settings.model_id,
        settings.region,
        settings.tracing_enabled,
    )
    return FinancialAnalysisReportUseCase(
        graph,
        prompts,
        observability=observability,
        recursion_limit=settings.recursion_limit,
    )


def create_app(report_use_case: Optional[FinancialAnalysisReportUseCase] = None) -> FastAPI:
    """Create the FastAPI app, wiring the production use case unless one is given."""
    if report_use_case is None:
        load_dotenv()
        settings = Settings.from_env()
        logging.basicConfig(
            level=settings.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        report_use_case = build_report_use_case(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        observability = app.state.report_use_case.observability
        if observability is not None:
            observability.flush()

    app = FastAPI(title="Financial Analysis Agent API", lifespan=lifespan)
    app.state.report_use_case = report_use_case

    @app.get("/financialAnalysis", response_class=MarkdownResponse)
    def financial_analysis(request: Request, company: Optional[str] = None) -> MarkdownResponse:
        """Generate the markdown financial analysis report for *company*.

        A missing ``company`` parameter fails the request with a server error;
        an empty one is passed through unchanged.
        """
        report = request.app.state.report_use_case.execute(company)
        return MarkdownResponse(report)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app
