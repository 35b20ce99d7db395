"""
Port (interface) for the tool-calling chat model that writes the report.
BedrockChatAdapter implements it in production; tests substitute a scripted model.
"""

from abc import ABC, abstractmethod
from typing import Any


class IChatModel(ABC):
    @abstractmethod
    def invoke(self, messages: list[Any]) -> Any:
        """Send the conversation and return the model's next AIMessage.

        A non-empty ``tool_calls`` list on the reply asks the agent graph to
        run the company data tools before the final report.
        """
        ...

    @abstractmethod
    def bind_tools(self, tools: list) -> "IChatModel":
        """Return a model that offers *tools* to the backend on every call."""
        ...
