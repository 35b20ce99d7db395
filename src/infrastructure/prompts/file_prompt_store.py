"""
Infrastructure adapter: bundled prompts/ directory → IPromptStore.
Template files ship inside the package under src/prompts/ and are read as UTF-8;
undecodable bytes become U+FFFD instead of failing the load.
"""

import logging
from pathlib import Path

from src.domain.exceptions import PromptLoadError
from src.domain.ports.prompt_store_port import IPromptStore

PROMPTS_DIR = Path(__file__).resolve().parent.parent.parent / "prompts"

logger = logging.getLogger(__name__)


class FilePromptStore(IPromptStore):
    """Reads prompt templates by path relative to a base directory."""

    def __init__(self, base_dir: Path = PROMPTS_DIR) -> None:
        self._base_dir = base_dir

    def read(self, path: str) -> str:
        full_path = self._base_dir / path
        try:
            text = full_path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise PromptLoadError(f"Failed to load prompt: {path}") from exc
        logger.debug("Prompt read — path=%s", full_path)
        return text
