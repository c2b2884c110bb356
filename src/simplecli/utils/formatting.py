"""Formatting utilities for simplecli."""

from typing import Any, Iterable, Sequence


def format_item(item: Any) -> str:
    """Text line for a displayable item."""
    return str(item)


def format_menu(candidates: Sequence[Any]) -> list[str]:
    """Number candidates for display, starting at 1."""
    return [f"{i}. {format_item(c)}" for i, c in enumerate(candidates, start=1)]


def format_choice_list(choices: Iterable[Any]) -> str:
    """Join choices into a comma separated list."""
    return ", ".join(format_item(c) for c in choices)


def format_page_indicator(page_number: int, total_pages: int) -> str:
    """Format the page position line shown under each page."""
    return f"(Page {page_number} of {total_pages})"
