"""
Infrastructure adapter: Amazon Bedrock (ChatBedrock) → IChatModel.

All ChatBedrock / langchain_aws details are confined here.
bind_tools() returns a new BedrockChatAdapter wrapping the tool-bound Runnable
so the IChatModel contract is preserved throughout.
"""

from typing import Any

from langchain_aws import ChatBedrock

from src.domain.ports.chat_model_port import IChatModel
from src.infrastructure.config import Settings


class BedrockChatAdapter(IChatModel):
    """Wraps ChatBedrock and exposes the IChatModel interface."""

    def __init__(self, settings: Settings | None = None, _runnable: Any = None) -> None:
        """
        Args:
            settings:  Model id, region and temperature. Defaults to Settings().
            _runnable: Optional pre-configured Runnable (used internally by
                       bind_tools to wrap the tool-bound model without re-constructing
                       ChatBedrock). Pass nothing for normal instantiation.
        """
        if _runnable is not None:
            self._llm = _runnable
        else:
            settings = settings or Settings()
            self._llm = ChatBedrock(
                model=settings.model_id,
                model_kwargs={"temperature": settings.temperature},
                region_name=settings.region,
            )

    def invoke(self, messages: list[Any]) -> Any:
        return self._llm.invoke(messages)

    def bind_tools(self, tools: list) -> "BedrockChatAdapter":
        """Return a new adapter that has the given tools bound for function-calling."""
        return BedrockChatAdapter(_runnable=self._llm.bind_tools(tools))
