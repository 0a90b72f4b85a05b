# python imports
import logging
from collections import Counter
from typing import Any, Dict, Iterable, List, Sequence

# project imports
from app.libs.pagination import Paginator
from app.products.models import Product

# app imports
from .constants import (
    SORT_PRICE_LOW,
    SORT_PRICE_HIGH,
    SORT_NEWEST,
    SORT_OLDEST,
    SCORE_WEIGHTS,
    PRICE_RANGES,
    SUGGESTION_LIMIT,
)
from .criteria import SearchCriteria

logger = logging.getLogger(__name__)


class SearchService:
    @staticmethod
    def search(catalog: Iterable[Product], criteria: SearchCriteria) -> Dict[str, Any]:
        """Run the full search pipeline over ``catalog``.

        Pagination is validated first so a rejected request never filters.
        Facets and ``total_count`` describe the filtered set before slicing.
        """
        paginator = Paginator(page=criteria.page, limit=criteria.limit)
        paginator.validate()

        products = list(catalog)
        matches = SearchService.filter_products(products, criteria)
        matches = SearchService.sort_products(matches, criteria.sort_by, criteria.query)
        facets = SearchService.calculate_facets(matches)
        page = paginator.paginate(matches)

        result = {
            "products": page["items"],
            "total_count": page["total_items"],
            "facets": facets,
        }

        if criteria.query:
            result["suggestions"] = SearchService.generate_suggestions(
                criteria.query, products
            )

        logger.debug(
            f"Search q={criteria.query!r} sort={criteria.sort_by} "
            f"matched {page['total_items']}, returning {len(page['items'])}"
        )
        return result

    @staticmethod
    def filter_products(
        products: Iterable[Product], criteria: SearchCriteria
    ) -> List[Product]:
        """Products passing every supplied filter, in their original order"""
        query_lower = criteria.query.lower()
        conditions = set(criteria.conditions)
        brands = set(criteria.brands)

        def matches(product: Product) -> bool:
            if not product.is_active():
                return False

            if query_lower and not (
                query_lower in product.title.lower()
                or query_lower in product.description.lower()
                or any(
                    query_lower in value.lower()
                    for value in product.string_specifications()
                )
            ):
                return False

            if criteria.category and product.category != criteria.category:
                return False

            if criteria.subcategory and product.subcategory != criteria.subcategory:
                return False

            if criteria.price_min is not None and product.price < criteria.price_min:
                return False

            if criteria.price_max is not None and product.price > criteria.price_max:
                return False

            if conditions and product.condition.value not in conditions:
                return False

            if brands and product.brand not in brands:
                return False

            # Exact and case-sensitive, unlike the text query
            if criteria.location and product.location.city != criteria.location:
                return False

            return True

        return [product for product in products if matches(product)]

    @staticmethod
    def calculate_relevance_score(product: Product, query_lower: str) -> int:
        score = 0
        title = product.title.lower()

        if query_lower in title:
            score += SCORE_WEIGHTS["TITLE_CONTAINS"]
            if title == query_lower:
                score += SCORE_WEIGHTS["TITLE_EXACT"]
            if title.startswith(query_lower):
                score += SCORE_WEIGHTS["TITLE_PREFIX"]

        if query_lower in product.description.lower():
            score += SCORE_WEIGHTS["DESCRIPTION_CONTAINS"]

        for value in product.string_specifications():
            if query_lower in value.lower():
                score += SCORE_WEIGHTS["SPECIFICATION_CONTAINS"]

        if query_lower in product.brand.lower():
            score += SCORE_WEIGHTS["BRAND_CONTAINS"]

        return score

    @staticmethod
    def sort_products(
        products: Sequence[Product], sort_by: str, query: str = ""
    ) -> List[Product]:
        """Order products for ``sort_by``; ties keep their incoming order.

        ``sorted`` is stable, including with ``reverse=True``. Unknown sort
        modes fall through to relevance.
        """
        if sort_by == SORT_PRICE_LOW:
            return sorted(products, key=lambda p: p.price)

        if sort_by == SORT_PRICE_HIGH:
            return sorted(products, key=lambda p: p.price, reverse=True)

        if sort_by == SORT_OLDEST:
            return sorted(products, key=lambda p: p.created_at)

        if sort_by == SORT_NEWEST or not query:
            return sorted(products, key=lambda p: p.created_at, reverse=True)

        query_lower = query.lower()
        return sorted(
            products,
            key=lambda p: SearchService.calculate_relevance_score(p, query_lower),
            reverse=True,
        )

    @staticmethod
    def calculate_facets(products: Sequence[Product]) -> Dict[str, List[Dict[str, Any]]]:
        """Grouped counts over the filtered set, in discovery order"""
        categories = Counter(p.category for p in products)
        brands = Counter(p.brand for p in products)
        conditions = Counter(p.condition.value for p in products)

        return {
            "categories": [{"value": k, "count": v} for k, v in categories.items()],
            "brands": [{"value": k, "count": v} for k, v in brands.items()],
            "conditions": [{"value": k, "count": v} for k, v in conditions.items()],
            "price_ranges": SearchService.calculate_price_ranges(products),
        }

    @staticmethod
    def calculate_price_ranges(products: Sequence[Product]) -> List[Dict[str, Any]]:
        if not products:
            return []

        ranges = []
        for low, high in PRICE_RANGES:
            count = sum(
                1 for p in products if p.price >= low and (high is None or p.price < high)
            )
            if count:
                ranges.append({"min": low, "max": high, "count": count})
        return ranges

    @staticmethod
    def generate_suggestions(query: str, products: Iterable[Product]) -> List[str]:
        """Up to SUGGESTION_LIMIT distinct titles and brands matching ``query``.

        Scans the whole catalog once, title before brand for each product.
        """
        query_lower = query.lower()
        # dict keeps discovery order
        suggestions: Dict[str, None] = {}

        for product in products:
            if query_lower in product.title.lower():
                suggestions.setdefault(product.title)
            if query_lower in product.brand.lower():
                suggestions.setdefault(product.brand)
            if len(suggestions) >= SUGGESTION_LIMIT:
                break

        return list(suggestions)[:SUGGESTION_LIMIT]
