"""Markup sanitisation shared by query parsing and response shaping."""

from __future__ import annotations

from typing import Any

import nh3


def sanitize_text(value: Any) -> str:
    """Strip script-bearing markup from ``value`` and return safe HTML text.

    ``None`` becomes an empty string and other non-strings are stringified
    first. ``<script>``/``<style>`` elements are dropped together with their
    contents; harmless inline markup survives with unsafe attributes removed.
    Applying the function to its own output returns the same string.
    """

    if value is None:
        return ""
    if not isinstance(value, str):
        value = str(value)
    if not value:
        return ""
    return nh3.clean(value)


__all__ = ["sanitize_text"]
