# python imports
import logging
from operator import attrgetter

# project imports
from app.libs.pagination import Paginator
from app.libs.errors import NotFoundError

# app imports
from .constants import (
    PRODUCT_FILTER_KEYS,
    PRODUCT_SORT_FIELDS,
    DEFAULT_SORT_FIELD,
    DEFAULT_SORT_ORDER,
)

logger = logging.getLogger(__name__)


class ProductService:
    @staticmethod
    def get_product(catalog, product_id):
        product = catalog.get(product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product

    @staticmethod
    def list_products(catalog, args):
        """Active products narrowed by the listing filters.

        Category, subcategory, condition and city match exactly; ``search``
        is a case-insensitive substring of title, description or brand.
        Ordered by ``sort_by``/``sort_order``, newest first by default.
        """
        paginator = Paginator(page=args.get("page", 1), limit=args.get("limit", 20))
        paginator.validate()

        products = catalog.active_products()

        category = args.get(PRODUCT_FILTER_KEYS["CATEGORY"])
        if category:
            products = [p for p in products if p.category == category]

        subcategory = args.get(PRODUCT_FILTER_KEYS["SUBCATEGORY"])
        if subcategory:
            products = [p for p in products if p.subcategory == subcategory]

        condition = args.get(PRODUCT_FILTER_KEYS["CONDITION"])
        if condition:
            products = [p for p in products if p.condition.value == condition]

        city = args.get(PRODUCT_FILTER_KEYS["CITY"])
        if city:
            products = [p for p in products if p.location.city == city]

        min_price = args.get(PRODUCT_FILTER_KEYS["MIN_PRICE"])
        if min_price is not None:
            products = [p for p in products if p.price >= min_price]

        max_price = args.get(PRODUCT_FILTER_KEYS["MAX_PRICE"])
        if max_price is not None:
            products = [p for p in products if p.price <= max_price]

        search = args.get(PRODUCT_FILTER_KEYS["SEARCH"])
        if search:
            needle = search.lower()
            products = [
                p
                for p in products
                if needle in p.title.lower()
                or needle in p.description.lower()
                or needle in p.brand.lower()
            ]

        sort_by = args.get(PRODUCT_FILTER_KEYS["SORT_BY"]) or DEFAULT_SORT_FIELD
        sort_order = args.get(PRODUCT_FILTER_KEYS["SORT_ORDER"]) or DEFAULT_SORT_ORDER
        products = sorted(
            products,
            key=attrgetter(PRODUCT_SORT_FIELDS[sort_by]),
            reverse=sort_order == "desc",
        )
        result = paginator.paginate(products)

        logger.debug(
            f"Listed {result['total_items']} products sorted by {sort_by} {sort_order}"
        )
        return {
            "items": result["items"],
            "pagination": {
                "page": result["page"],
                "limit": result["limit"],
                "total_items": result["total_items"],
                "total_pages": result["total_pages"],
            },
        }
