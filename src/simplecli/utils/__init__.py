"""Utilities for simplecli."""

from simplecli.utils.formatting import (
    format_choice_list,
    format_item,
    format_menu,
    format_page_indicator,
)

__all__ = [
    "format_choice_list",
    "format_item",
    "format_menu",
    "format_page_indicator",
]
