"""
Port (interface) for tracing report generation runs.
The report use case treats a missing handler as tracing disabled.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class IObservabilityHandler(ABC):
    @abstractmethod
    def as_callback(self) -> Any:
        """Callback object attached to every report run."""
        ...

    @abstractmethod
    def run_metadata(self, company_name: Optional[str]) -> dict[str, Any]:
        """Metadata recorded on the trace of the report for *company_name*."""
        ...

    @abstractmethod
    def flush(self) -> None:
        """Send buffered traces; called once when the HTTP app shuts down."""
        ...
