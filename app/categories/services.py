# python imports
import logging
from collections import Counter

# project imports
from app.libs.errors import NotFoundError

# app imports
from .management.data import CATEGORIES

logger = logging.getLogger(__name__)


class CategoryService:
    @staticmethod
    def get_category_tree(catalog):
        """Category taxonomy with counts of active products"""
        active = catalog.active_products()
        category_counts = Counter(p.category for p in active)
        subcategory_counts = Counter((p.category, p.subcategory) for p in active)

        def build_tree(category):
            slug = category["slug"]
            return {
                "name": category["name"],
                "slug": slug,
                "description": category["description"],
                "count": category_counts[slug],
                "subcategories": [
                    {"name": name, "count": subcategory_counts[(slug, name)]}
                    for name in category["subcategories"]
                ],
            }

        return [build_tree(category) for category in CATEGORIES]

    @staticmethod
    def get_category(catalog, slug):
        for category in CategoryService.get_category_tree(catalog):
            if category["slug"] == slug:
                return category
        raise NotFoundError("Category not found")
