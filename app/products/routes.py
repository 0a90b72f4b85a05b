import logging

# package imports
from flask_smorest import Blueprint
from flask.views import MethodView

# project imports
from external.catalog import get_catalog

# app imports
from .services import ProductService
from .schemas import ProductSchema, ProductListQueryArgs, ProductListResultSchema

logger = logging.getLogger(__name__)

bp = Blueprint(
    "products", __name__, description="Product operations", url_prefix="/products"
)


@bp.route("/")
class ProductList(MethodView):
    @bp.arguments(ProductListQueryArgs, location="query", error_status_code=400)
    @bp.response(200, ProductListResultSchema)
    def get(self, args):
        """
        List active products.

        - `category`, `subcategory`, `condition` and `city` match exactly.
        - `search` matches title, description or brand, case-insensitively.
        - `minPrice`/`maxPrice` are inclusive; malformed values are ignored.
        - `sortBy` (createdAt, updatedAt, price, title, views, favorites) and
          `sortOrder` (asc, desc) default to newest first.
        """
        return ProductService.list_products(get_catalog(), args)


@bp.route("/<product_id>")
class ProductDetail(MethodView):
    @bp.response(200, ProductSchema)
    def get(self, product_id):
        """Get product details"""
        return ProductService.get_product(get_catalog(), product_id)
