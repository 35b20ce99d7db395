"""
Application service: cached prompt loading and {name} placeholder substitution.

Business decisions owned here:
  - A template is read from the IPromptStore at most once per loader; the
    cached text is kept for the loader's lifetime and never reloaded.
  - Substitution is plain literal replacement of "{key}" in the order the
    variables are given. Output is not re-scanned, and placeholders with no
    matching key are left as-is.

One PromptLoader is built at the composition root and injected into the use
cases that need it, so the cache lives as long as the process.
"""

import logging
import threading
from typing import Mapping, Optional

from src.domain.ports.prompt_store_port import IPromptStore

logger = logging.getLogger(__name__)


class PromptLoader:
    def __init__(self, store: IPromptStore) -> None:
        self._store = store
        self._cache: dict[str, str] = {}
        self._lock = threading.Lock()

    def load(self, path: str) -> str:
        """Return the template text for *path*, reading the store on first use only.

        Two threads loading the same uncached path may both hit the store; the
        first one to insert wins and both receive that value.

        Raises:
            PromptLoadError: propagated from the store; nothing is cached.
        """
        cached = self._cache.get(path)
        if cached is not None:
            return cached

        text = self._store.read(path)
        with self._lock:
            text = self._cache.setdefault(path, text)
        logger.debug("Prompt cached — path=%s chars=%d", path, len(text))
        return text

    def render(self, path: str, variables: Optional[Mapping[str, str]] = None) -> str:
        """Load the template at *path* and replace every ``{key}`` with its value.

        Args:
            path:      Template path relative to the prompts directory.
            variables: Placeholder name to replacement text, applied in order.

        Returns:
            The rendered prompt text.

        Raises:
            ValueError: if a variable's value is None.
        """
        variables = variables or {}
        for key, value in variables.items():
            if value is None:
                raise ValueError(f"Prompt variable {key!r} has no value")

        result = self.load(path)
        for key, value in variables.items():
            result = result.replace("{" + key + "}", value)
        return result
