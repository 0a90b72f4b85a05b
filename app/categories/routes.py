# package imports
from flask_smorest import Blueprint
from flask.views import MethodView

# project imports
from external.catalog import get_catalog

# app imports
from .services import CategoryService
from .schemas import CategoryTreeSchema

bp = Blueprint(
    "categories", __name__, description="Category operations", url_prefix="/categories"
)


@bp.route("/")
class CategoryList(MethodView):
    @bp.response(200, CategoryTreeSchema(many=True))
    def get(self):
        """Get category hierarchy with active product counts"""
        return CategoryService.get_category_tree(get_catalog())


@bp.route("/<slug>")
class CategoryDetail(MethodView):
    @bp.response(200, CategoryTreeSchema)
    def get(self, slug):
        """Get a single category"""
        return CategoryService.get_category(get_catalog(), slug)
