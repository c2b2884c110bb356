"""List presenter: full dumps, paged output, and menu selection."""

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Sequence

from simplecli.core.prompt import PromptEngine
from simplecli.core.terminal import Terminal
from simplecli.core.validation import NumberKind
from simplecli.utils.constants import (
    BROWSE_PROMPT,
    CONTINUE_PROMPT,
    DEFAULT_PAGE_SIZE,
    NO_ITEMS_MESSAGE,
    PAGE_NUMBER_PROMPT,
    NavCommand,
)
from simplecli.utils.debug import debug_pager
from simplecli.utils.exceptions import EmptyCandidates, InputClosed, InvalidPageSize
from simplecli.utils.formatting import format_item, format_page_indicator


@dataclass(frozen=True)
class Page:
    """A slice of a list shown at once."""

    index: int
    items: tuple[Any, ...]
    total_pages: int

    @property
    def number(self) -> int:
        """1-based page number."""
        return self.index + 1

    @property
    def is_last(self) -> bool:
        return self.number >= self.total_pages


def _check_page_size(page_size: Any) -> int:
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size <= 0:
        raise InvalidPageSize(page_size)
    return page_size


def count_pages(total_items: int, page_size: int) -> int:
    """Number of pages needed for ``total_items`` (0 for an empty list)."""
    page_size = _check_page_size(page_size)
    return -(-total_items // page_size)


def get_page(items: Sequence[Any], index: int, page_size: int) -> Page:
    """Build page ``index`` (0-based) of ``items``.

    An empty list has a single empty page.
    """
    total = max(count_pages(len(items), page_size), 1)
    if not 0 <= index < total:
        raise IndexError(f"page index {index} out of range")
    start = index * page_size
    return Page(
        index=index,
        items=tuple(items[start : start + page_size]),
        total_pages=total,
    )


def iter_pages(items: Sequence[Any], page_size: int) -> Iterator[Page]:
    """Yield the pages of ``items`` in order.

    The page size is checked when this is called, not on first iteration.
    """
    total = count_pages(len(items), page_size)
    return (get_page(items, i, page_size) for i in range(total))


class ListPresenter:
    """Writes lists to the terminal and turns menu answers into items.

    The presenter never modifies the lists it is given.

    Args:
        engine: Prompt engine used for continue/navigation/menu answers
        no_items_message: Line written for an empty list
        page_indicator: Write "(Page n of m)" under each page
        page_size: Used when a paging call does not pass its own
    """

    def __init__(
        self,
        engine: Optional[PromptEngine] = None,
        no_items_message: str = NO_ITEMS_MESSAGE,
        page_indicator: bool = True,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self.engine = engine or PromptEngine()
        self.no_items_message = no_items_message
        self.page_indicator = page_indicator
        self.page_size = page_size

    @classmethod
    def from_config(cls, config, terminal: Optional[Terminal] = None) -> "ListPresenter":
        return cls(
            engine=PromptEngine.from_config(config, terminal=terminal),
            page_size=config.page_size,
        )

    @property
    def terminal(self) -> Terminal:
        return self.engine.terminal

    def _page_size(self, page_size: Optional[int]) -> int:
        return self.page_size if page_size is None else page_size

    def _write_header(self, header: Optional[str]) -> None:
        if header is not None:
            self.terminal.write(header)

    def _render_page(self, page: Page, header: Optional[str]) -> None:
        self._write_header(header)
        if page.items:
            self.terminal.write_lines(format_item(item) for item in page.items)
        else:
            self.terminal.write(self.no_items_message)
        if self.page_indicator:
            self.terminal.write(format_page_indicator(page.number, page.total_pages))
        debug_pager("page shown", page=page.number, total=page.total_pages)

    def display_all(self, items: Sequence[Any], header: Optional[str] = None) -> None:
        """Write every item on its own line."""
        self._write_header(header)
        if not items:
            self.terminal.write(self.no_items_message)
            return
        self.terminal.write_lines(format_item(item) for item in items)

    def display_paginated(
        self,
        items: Sequence[Any],
        page_size: Optional[int] = None,
        header: Optional[str] = None,
    ) -> int:
        """Write ``items`` a page at a time, asking to continue between pages.

        Stops early on a "no" answer or when input is closed while
        waiting for one. Neither is an error. ``page_size`` defaults to
        the presenter's own.

        Returns:
            Number of pages written

        Raises:
            InvalidPageSize: ``page_size`` is not a positive integer; raised
                before anything is written
        """
        page_size = self._page_size(page_size)
        pages = iter_pages(items, page_size)
        if not items:
            self._write_header(header)
            self.terminal.write(self.no_items_message)
            return 0

        shown = 0
        for page in pages:
            self._render_page(page, header)
            shown += 1
            if page.is_last:
                break
            try:
                if not self.engine.confirm(CONTINUE_PROMPT):
                    debug_pager("stopped by user", page=page.number)
                    break
            except InputClosed:
                debug_pager("input closed, stopping", page=page.number)
                break
        return shown

    def browse(
        self,
        items: Sequence[Any],
        page_size: Optional[int] = None,
        header: Optional[str] = None,
    ) -> None:
        """Page through ``items`` with next / previous / go-to / exit commands.

        Returns when the user exits or input is closed.
        """
        page_size = self._page_size(page_size)
        total = max(count_pages(len(items), page_size), 1)
        current = 0
        while True:
            self._render_page(get_page(items, current, page_size), header)
            try:
                command = self.engine.prompt_one_of(
                    BROWSE_PROMPT, NavCommand.ALL, case_sensitive=False
                )
                if command == NavCommand.EXIT:
                    return
                if command == NavCommand.NEXT:
                    current = min(current + 1, total - 1)
                elif command == NavCommand.PREVIOUS:
                    current = max(current - 1, 0)
                elif command == NavCommand.SELECT:
                    number = self.engine.prompt_number(
                        PAGE_NUMBER_PROMPT,
                        NumberKind.INTEGER,
                        value_range=(1, total),
                    )
                    current = number - 1
            except InputClosed:
                debug_pager("input closed, leaving pager", page=current + 1)
                return

    def select_from_list(
        self, message: Optional[str], items: Sequence[Any]
    ) -> tuple[int, Any]:
        """Let the user pick an item from a numbered menu.

        Returns:
            ``(index, item)`` with the original item, not its text

        Raises:
            EmptyCandidates: ``items`` is empty (nothing is printed)
        """
        if not items:
            raise EmptyCandidates()
        labels = [format_item(item) for item in items]
        index, _ = self.engine.prompt_choice(message, labels)
        return index, items[index]
