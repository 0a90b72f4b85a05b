from typing import Any, Dict, List, Sequence, TypeVar
from math import ceil

from main.config import settings

from .errors import ValidationError

T = TypeVar("T")

MAX_PER_PAGE = settings.SEARCH_MAX_LIMIT


class Paginator:
    def __init__(
        self, page: int = 1, limit: int = 20, max_limit: int = MAX_PER_PAGE
    ) -> None:
        """
        Initialize paginator for an in-memory sequence

        Args:
            page: Current page number, 1-based (default: 1)
            limit: Items per page (default: 20)
            max_limit: Upper bound accepted for limit (default: 100)
        """
        self.page = page
        self.limit = limit
        self.max_limit = max_limit

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def validate(self) -> None:
        """Reject malformed pagination parameters.

        Called before any filtering so that an invalid request never
        touches the catalog.
        """
        if not self._is_int(self.page) or self.page < 1:
            raise ValidationError("Invalid pagination parameters")

        if not self._is_int(self.limit) or not 1 <= self.limit <= self.max_limit:
            raise ValidationError("Invalid pagination parameters")

    def paginate(self, items: Sequence[T]) -> Dict[str, Any]:
        """
        Slice an ordered sequence into the requested page

        Args:
            items: Filtered and sorted sequence; never modified

        Returns:
            Dictionary containing:
            - items: List of items on the current page (empty past the end)
            - page: Current page number
            - limit: Items per page
            - total_items: Size of the sequence before slicing
            - total_pages: Total number of pages
        """
        self.validate()

        total = len(items)
        page_items: List[T] = list(items[self.offset : self.offset + self.limit])

        return {
            "items": page_items,
            "page": self.page,
            "limit": self.limit,
            "total_items": total,
            "total_pages": ceil(total / self.limit) if total else 0,
        }

    @staticmethod
    def _is_int(value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)
