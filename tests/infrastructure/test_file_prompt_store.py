"""Tests for the file-backed prompt store."""

import pytest

from src.domain.exceptions import PromptLoadError
from src.infrastructure.prompts.file_prompt_store import PROMPTS_DIR, FilePromptStore


def test_bundled_prompts_exist():
    for name in ["financial-analysis-system.txt", "financial-analysis-user.txt"]:
        assert (PROMPTS_DIR / name).exists(), f"Missing prompt file: {name}"


def test_user_prompt_has_company_placeholder():
    assert "{companyName}" in FilePromptStore().read("financial-analysis-user.txt")


def test_reads_utf8_text(tmp_path):
    (tmp_path / "note.txt").write_text("Société Générale — {companyName}", encoding="utf-8")

    assert FilePromptStore(tmp_path).read("note.txt") == "Société Générale — {companyName}"


def test_reads_nested_path(tmp_path):
    (tmp_path / "reports").mkdir()
    (tmp_path / "reports" / "summary.txt").write_text("summary", encoding="utf-8")

    assert FilePromptStore(tmp_path).read("reports/summary.txt") == "summary"


def test_missing_file_raises_prompt_load_error(tmp_path):
    with pytest.raises(PromptLoadError, match="Failed to load prompt: absent.txt") as exc_info:
        FilePromptStore(tmp_path).read("absent.txt")

    assert isinstance(exc_info.value.__cause__, OSError)


def test_invalid_utf8_bytes_are_replaced(tmp_path):
    (tmp_path / "bad.txt").write_bytes(b"Hello \xff\xfe {companyName}")

    text = FilePromptStore(tmp_path).read("bad.txt")

    assert text == "Hello \ufffd\ufffd {companyName}"
