from __future__ import annotations

import pytest

from shared.sanitize import sanitize_text


def test_sanitize_text_drops_script_elements_with_content() -> None:
    assert sanitize_text("<script>alert('x')</script>Grand Hotel") == "Grand Hotel"


def test_sanitize_text_keeps_plain_text_and_urls() -> None:
    assert sanitize_text("Hôtel Lumière") == "Hôtel Lumière"
    assert sanitize_text("https://cdn.example.com/a.jpg") == "https://cdn.example.com/a.jpg"


def test_sanitize_text_removes_event_handlers() -> None:
    cleaned = sanitize_text('<img src="a.jpg" onerror="alert(1)">')

    assert "onerror" not in cleaned
    assert 'src="a.jpg"' in cleaned


@pytest.mark.parametrize("value", [None, ""])
def test_sanitize_text_empty_values(value: str | None) -> None:
    assert sanitize_text(value) == ""


def test_sanitize_text_stringifies_non_strings() -> None:
    assert sanitize_text(42) == "42"


@pytest.mark.parametrize(
    "value",
    [
        "<b>Bold</b> & <i>brave</i>",
        '<a href="javascript:void(0)" onclick="x()">link</a>',
        "<div><style>p{}</style>text</div>",
        "Rooms from 5 < 10 guests",
    ],
)
def test_sanitize_text_is_idempotent(value: str) -> None:
    once = sanitize_text(value)

    assert sanitize_text(once) == once
    assert "<script" not in once
    assert "onclick" not in once
