import json
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from flask import current_app

from app.products.models import Product
from app.products.mock_data import generate_product_dataset
from app.products.schemas import ProductSchema

logger = logging.getLogger(__name__)

EXTENSION_KEY = "catalog"


class Catalog:
    """Read-only, already-loaded collection of products.

    Built once by the application factory and handed to services per request.
    Nothing in the search pipeline mutates it.
    """

    def __init__(self, products: Iterable[Product]):
        self._products: Tuple[Product, ...] = tuple(products)
        self._by_id = {}
        for product in self._products:
            if product.id in self._by_id:
                logger.error(f"Duplicate product id in catalog: {product.id}")
                raise ValueError(f"Duplicate product id: {product.id}")
            self._by_id[product.id] = product

    @property
    def products(self) -> Tuple[Product, ...]:
        return self._products

    def __len__(self):
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def get(self, product_id) -> Optional[Product]:
        return self._by_id.get(product_id)

    def active_products(self) -> List[Product]:
        return [product for product in self._products if product.is_active()]

    @classmethod
    def generate(cls, seed, products_per_subcategory=5, reference_time=None):
        return cls(
            generate_product_dataset(
                seed=seed,
                products_per_subcategory=products_per_subcategory,
                reference_time=reference_time,
            )
        )

    @classmethod
    def from_json(cls, path):
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
        products = ProductSchema(many=True).load(data)
        logger.info(f"Loaded {len(products)} products from {path}")
        return cls(products)

    def to_json(self, path):
        data = ProductSchema(many=True).dump(self._products)
        Path(path).write_text(json.dumps(data, indent=2), encoding="utf-8")
        logger.info(f"Wrote {len(data)} products to {path}")


def init_catalog(app, catalog: Optional[Catalog] = None) -> Catalog:
    """Build the catalog from settings unless one is supplied, and register it"""
    if catalog is None:
        path = app.config.get("CATALOG_PATH")
        if path:
            catalog = Catalog.from_json(path)
        else:
            catalog = Catalog.generate(
                seed=app.config["CATALOG_SEED"],
                products_per_subcategory=app.config["CATALOG_PRODUCTS_PER_SUBCATEGORY"],
            )

    app.extensions[EXTENSION_KEY] = catalog
    logger.info(f"Catalog ready with {len(catalog)} products")
    return catalog


def get_catalog() -> Catalog:
    return current_app.extensions[EXTENSION_KEY]
