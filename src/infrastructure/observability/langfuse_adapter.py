"""
Infrastructure adapter: Langfuse → IObservabilityHandler.

Built by the composition root only when LANGFUSE_PUBLIC_KEY is set. Langfuse
reads its keys and host from the environment, so the imports stay inside the
methods and the module loads without them.
"""

import logging
from typing import Any, Optional

from src.domain.ports.observability_port import IObservabilityHandler

REPORT_TAG = "financial-analysis"

logger = logging.getLogger(__name__)


class LangfuseObservabilityHandler(IObservabilityHandler):
    """Traces each report run through the Langfuse LangChain CallbackHandler."""

    def __init__(self) -> None:
        from langfuse.langchain import CallbackHandler
        self._handler = CallbackHandler()
        logger.info("Langfuse tracing enabled — tag=%s", REPORT_TAG)

    def as_callback(self) -> Any:
        return self._handler

    def run_metadata(self, company_name: Optional[str]) -> dict[str, Any]:
        """Tag every report trace and record which company it was for."""
        return {"langfuse_tags": [REPORT_TAG], "company_name": company_name}

    def flush(self) -> None:
        from langfuse import get_client
        get_client().flush()
        logger.debug("Langfuse traces flushed")
