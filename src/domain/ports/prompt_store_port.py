"""
Port (interface) for prompt template storage.
Infrastructure adapters (e.g. FilePromptStore) must implement this interface.
"""

from abc import ABC, abstractmethod


class IPromptStore(ABC):
    @abstractmethod
    def read(self, path: str) -> str:
        """Return the raw text of the template at *path*.

        Raises:
            PromptLoadError: if the template is missing or unreadable.
        """
        ...
