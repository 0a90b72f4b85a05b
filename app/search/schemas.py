from marshmallow import Schema, fields, EXCLUDE
from webargs.fields import DelimitedList

from app.libs.fields import LenientFloat
from app.libs.schemas import PaginationQueryArgs
from app.products.schemas import ProductSchema
from .constants import SORT_RELEVANCE


class SearchQueryArgs(PaginationQueryArgs):
    class Meta:
        unknown = EXCLUDE

    query = fields.Str(data_key="q", load_default="")
    category = fields.Str()
    subcategory = fields.Str()
    price_min = LenientFloat(data_key="priceMin")
    price_max = LenientFloat(data_key="priceMax")
    condition = DelimitedList(fields.Str())
    conditions = DelimitedList(fields.Str())
    brands = DelimitedList(fields.Str())
    location = fields.Str()
    sort_by = fields.Str(data_key="sortBy", load_default=SORT_RELEVANCE)


class FacetValueSchema(Schema):
    value = fields.Str()
    count = fields.Int()


class PriceRangeFacetSchema(Schema):
    min = fields.Float()
    max = fields.Float(allow_none=True)
    count = fields.Int()


class SearchFacetsSchema(Schema):
    categories = fields.List(fields.Nested(FacetValueSchema))
    brands = fields.List(fields.Nested(FacetValueSchema))
    conditions = fields.List(fields.Nested(FacetValueSchema))
    price_ranges = fields.List(
        fields.Nested(PriceRangeFacetSchema), data_key="priceRanges"
    )


class SearchResultSchema(Schema):
    """Search response envelope.

    ``suggestions`` is only present when the request carried a query.
    """

    products = fields.List(fields.Nested(ProductSchema))
    total_count = fields.Int(data_key="totalCount")
    facets = fields.Nested(SearchFacetsSchema)
    suggestions = fields.List(fields.Str())
