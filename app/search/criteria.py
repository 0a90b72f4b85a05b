from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .constants import SORT_RELEVANCE


@dataclass
class SearchCriteria:
    query: str = ""
    category: Optional[str] = None
    subcategory: Optional[str] = None
    price_min: Optional[float] = None
    price_max: Optional[float] = None
    conditions: List[str] = field(default_factory=list)
    brands: List[str] = field(default_factory=list)
    location: Optional[str] = None
    sort_by: str = SORT_RELEVANCE
    page: int = 1
    limit: int = 20

    @classmethod
    def from_args(cls, args: Dict[str, Any]) -> "SearchCriteria":
        """Build criteria from parsed query arguments.

        Empty strings count as absent and empty list entries are dropped.
        ``conditions`` is only read when ``condition`` is absent.
        """
        conditions = args.get("condition") or args.get("conditions") or []
        return cls(
            query=args.get("query") or "",
            category=args.get("category") or None,
            subcategory=args.get("subcategory") or None,
            price_min=args.get("price_min"),
            price_max=args.get("price_max"),
            conditions=[c for c in conditions if c],
            brands=[b for b in args.get("brands") or [] if b],
            location=args.get("location") or None,
            sort_by=args.get("sort_by") or SORT_RELEVANCE,
            page=args.get("page", 1),
            limit=args.get("limit", 20),
        )
