"""Gallery state driven from the API client.

Holds the current page number, search text and tag filter, and a copy of
the page last fetched. The copy is only for rendering; every mutation is
followed by a fresh fetch.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum

import httpx

from cattery.client.api_client import ApiError, CatteryApiClient

logger = logging.getLogger(__name__)

SEARCH_DEBOUNCE_SECONDS = 0.4
RETRY_MESSAGE = "Failed to load cats. Please try again."
LOGIN_MESSAGE = "Please log in to view the cat gallery."


class ViewState(str, Enum):
    LOADING = "loading"
    READY = "ready"
    EMPTY = "empty"
    LOGIN_REQUIRED = "login_required"
    ERROR = "error"


@dataclass
class GalleryPage:
    cats: list[dict] = field(default_factory=list)
    total_count: int = 0
    total_pages: int = 0
    current_page: int = 1
    limit: int = 8

    @classmethod
    def from_response(cls, data: dict) -> "GalleryPage":
        return cls(
            cats=list(data.get("cats", [])),
            total_count=data.get("totalCount", 0),
            total_pages=data.get("totalPages", 0),
            current_page=data.get("currentPage", 1),
            limit=data.get("limit", 8),
        )


class GalleryClient:
    """Paging, search and mutation flow of the cat gallery."""

    def __init__(
        self,
        api: CatteryApiClient,
        *,
        limit: int = 8,
        debounce_seconds: float = SEARCH_DEBOUNCE_SECONDS,
    ):
        self.api = api
        self.limit = limit
        self.debounce_seconds = debounce_seconds

        self.current_page = 1
        self.search = ""
        self.tag_filter = ""
        self.state = ViewState.LOADING
        self.message: str | None = None
        self.page: GalleryPage | None = None

        self._pending_search: asyncio.Task | None = None

    # ── Loading ─────────────────────────────────────────────────────────

    async def refresh(self) -> ViewState:
        """Fetch the current page and derive the view state from the outcome."""
        self.state = ViewState.LOADING
        self.message = None
        try:
            data = await self.api.list_cats(
                page=self.current_page,
                limit=self.limit,
                search=self.search,
                tag_filter=self.tag_filter,
            )
        except ApiError as exc:
            self.page = None
            if exc.is_unauthorized:
                self.state = ViewState.LOGIN_REQUIRED
                self.message = LOGIN_MESSAGE
            elif exc.status_code == 400:
                self.state = ViewState.ERROR
                self.message = exc.message
            else:
                logger.warning("Gallery load failed: %s", exc)
                self.state = ViewState.ERROR
                self.message = RETRY_MESSAGE
            return self.state
        except httpx.HTTPError as exc:
            logger.warning("Gallery load failed: %s", exc)
            self.page = None
            self.state = ViewState.ERROR
            self.message = RETRY_MESSAGE
            return self.state

        self.page = GalleryPage.from_response(data)
        self.current_page = self.page.current_page
        if self.page.cats:
            self.state = ViewState.READY
        else:
            self.state = ViewState.EMPTY
            self.message = (
                f'No cats found matching "{self.search}"' if self.search else "No cats found."
            )
        return self.state

    # ── Paging ──────────────────────────────────────────────────────────

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.page is not None and self.current_page < self.page.total_pages

    async def next_page(self) -> bool:
        if not self.has_next:
            return False
        self.current_page += 1
        await self.refresh()
        return True

    async def previous_page(self) -> bool:
        if not self.has_previous:
            return False
        self.current_page -= 1
        await self.refresh()
        return True

    def page_info(self) -> str | None:
        """Pager caption, or None when there is at most one page to show."""
        if self.page is None or self.page.total_count == 0 or self.page.total_pages <= 1:
            return None
        return (
            f"Page {self.page.current_page} of {self.page.total_pages} "
            f"({self.page.total_count} total cats)"
        )

    # ── Search and filter ───────────────────────────────────────────────

    def search_input(self, text: str) -> asyncio.Task:
        """Schedule a search for ``text``; a newer keystroke cancels the pending one.

        Must be called from a running event loop. The returned task can be
        awaited to wait for the debounced search to settle.
        """
        self._cancel_pending_search()
        self._pending_search = asyncio.create_task(self._debounced_search(text))
        return self._pending_search

    async def _debounced_search(self, text: str) -> None:
        await asyncio.sleep(self.debounce_seconds)
        term = (text or "").strip()
        if term == self.search:
            return
        self.search = term
        self.current_page = 1
        await self.refresh()

    def _cancel_pending_search(self) -> None:
        if self._pending_search is not None and not self._pending_search.done():
            self._pending_search.cancel()
        self._pending_search = None

    async def set_tag_filter(self, tag: str | None) -> ViewState:
        self.tag_filter = (tag or "").strip()
        self.current_page = 1
        return await self.refresh()

    # ── Mutations ───────────────────────────────────────────────────────

    async def save_cat(self, data: dict, cat_id: int | None = None) -> dict:
        """Create (no ``cat_id``) or replace a cat, then reload from page one."""
        if cat_id is None:
            result = await self.api.create_cat(data)
        else:
            result = await self.api.update_cat(cat_id, data)

        self._cancel_pending_search()
        self.current_page = 1
        self.search = ""
        await self.refresh()
        return result

    async def delete_cat(self, cat_id: int) -> dict:
        result = await self.api.delete_cat(cat_id)
        await self.refresh()
        # Deleting the only cat on the last page leaves that page empty
        if self.state == ViewState.EMPTY and self.current_page > 1:
            self.current_page -= 1
            await self.refresh()
        return result

    async def toggle_adoption(self, cat_id: int) -> dict:
        """Adopt the cat, or release it if the caller already adopted it.

        Returns the refreshed adoption status ``{catId, count, userAdopted}``.
        """
        status = await self.api.adoption_status(cat_id)
        if status.get("userAdopted"):
            await self.api.unadopt(cat_id)
        else:
            await self.api.adopt(cat_id)
        return await self.api.adoption_status(cat_id)
