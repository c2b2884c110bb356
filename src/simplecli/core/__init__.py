"""Core prompt and presentation logic for simplecli."""

from simplecli.core.presenter import (
    ListPresenter,
    Page,
    count_pages,
    get_page,
    iter_pages,
)
from simplecli.core.prompt import PromptEngine
from simplecli.core.terminal import Terminal
from simplecli.core.validation import NumberKind, Outcome, Rejection

__all__ = [
    "ListPresenter",
    "NumberKind",
    "Outcome",
    "Page",
    "PromptEngine",
    "Rejection",
    "Terminal",
    "count_pages",
    "get_page",
    "iter_pages",
]
