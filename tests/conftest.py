"""Pytest fixtures for chatmark tests."""

import pytest
from pathlib import Path

from chatmark.config import reset_settings
from chatmark.formatting.parser import MarkdownParser


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Isolate every test from the caller's environment and .env file."""
    for name in (
        "CHATMARK_SENTINEL",
        "CHATMARK_EMPTY_HEADING",
        "CHATMARK_BULLET_GLYPH",
        "CHATMARK_FORMAT",
        "CHATMARK_REPLAY_DELAY",
        "CHATMARK_CHUNK_SIZE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def parser() -> MarkdownParser:
    """Create a parser with default settings."""
    return MarkdownParser()


@pytest.fixture
def sample_response() -> str:
    """A complete assistant answer as it arrives from the stream."""
    return (
        "**Study Plan:**★"
        "* Review **Python basics** first★"
        "- Practice daily★"
        "Remember:★Consistency beats intensity."
    )


@pytest.fixture
def sample_sse_lines() -> list[str]:
    """A recorded event stream for the sample answer."""
    return [
        ": keep-alive\n",
        "data: **Study Plan:**★\n",
        "\n",
        "data: * Review **Python\n",
        "data:  basics** first★\n",
        "event: message\n",
        "data: \n",
        "data: - Practice daily\n",
        "data: [DONE]\n",
    ]


@pytest.fixture
def tmp_response_file(tmp_path: Path, sample_response: str) -> Path:
    """Create a temporary response file."""
    file_path = tmp_path / "answer.txt"
    file_path.write_text(sample_response, encoding="utf-8")
    return file_path


@pytest.fixture
def tmp_sse_file(tmp_path: Path, sample_sse_lines: list[str]) -> Path:
    """Create a temporary SSE transcript."""
    file_path = tmp_path / "answer.sse"
    file_path.write_text("".join(sample_sse_lines), encoding="utf-8")
    return file_path
