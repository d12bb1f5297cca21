"""Tests for configuration helpers."""

import pytest

from calorie_log.config import normalize_api_prefix


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, ""), ("", ""), (" / ", ""), ("api", "/api"), ("/api/", "/api")],
)
def test_normalize_api_prefix(raw: str | None, expected: str) -> None:
    assert normalize_api_prefix(raw) == expected
