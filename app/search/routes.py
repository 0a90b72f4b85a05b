import logging

from flask_smorest import Blueprint
from flask.views import MethodView

from external.catalog import get_catalog

from .criteria import SearchCriteria
from .schemas import SearchQueryArgs, SearchResultSchema
from .services import SearchService

logger = logging.getLogger(__name__)


bp = Blueprint(
    "search",
    __name__,
    description="Keyword search with filters, facets and suggestions",
    url_prefix="/search",
)


@bp.route("/")
class ProductSearch(MethodView):
    @bp.arguments(SearchQueryArgs, location="query", error_status_code=400)
    @bp.response(200, SearchResultSchema)
    def get(self, args):
        """
        Search active products.

        - `q` is matched case-insensitively against titles, descriptions and
          text specifications; an empty `q` matches every active product.
        - `condition`/`conditions` and `brands` take comma-separated values.
        - Facets and `totalCount` cover every match, not just this page.
        - Malformed `priceMin`/`priceMax` values are ignored.
        """
        criteria = SearchCriteria.from_args(args)
        return SearchService.search(get_catalog(), criteria)
