from datetime import timezone

from marshmallow import Schema, fields, validate, post_load, EXCLUDE
from app.libs.fields import LenientFloat
from app.libs.schemas import PaginationSchema, PaginationQueryArgs
from .constants import (
    PRODUCT_SORT_FIELDS,
    DEFAULT_SORT_FIELD,
    SORT_ORDERS,
    DEFAULT_SORT_ORDER,
)
from .models import Product, Location, ProductCondition, ProductStatus


class LocationSchema(Schema):
    city = fields.Str(required=True)
    region = fields.Str(required=True)
    country = fields.Str(required=True)

    @post_load
    def make_location(self, data, **kwargs):
        return Location(**data)


class ProductSchema(Schema):
    """Wire format of a catalog product.

    Field names are camelCase on the wire and snake_case on the model. The
    same schema loads catalog JSON files, so ``load`` returns ``Product``.
    """

    id = fields.Str(required=True)
    title = fields.Str(required=True)
    description = fields.Str(required=True)
    price = fields.Float(required=True, validate=validate.Range(min=0, min_inclusive=False))
    condition = fields.Enum(ProductCondition, by_value=True, required=True)
    status = fields.Enum(ProductStatus, by_value=True, required=True)
    category = fields.Str(required=True)
    subcategory = fields.Str(required=True)
    brand = fields.Str(required=True)
    specifications = fields.Dict(keys=fields.Str(), values=fields.Raw())
    images = fields.List(fields.Str())
    location = fields.Nested(LocationSchema, required=True)
    seller_id = fields.Str(required=True, data_key="sellerId")
    created_at = fields.AwareDateTime(
        required=True, data_key="createdAt", default_timezone=timezone.utc
    )
    updated_at = fields.AwareDateTime(
        required=True, data_key="updatedAt", default_timezone=timezone.utc
    )
    views = fields.Int()
    favorites = fields.Int()

    @post_load
    def make_product(self, data, **kwargs):
        return Product(**data)


class ProductListQueryArgs(PaginationQueryArgs):
    class Meta:
        unknown = EXCLUDE

    category = fields.Str(required=False)
    subcategory = fields.Str(required=False)
    min_price = LenientFloat(data_key="minPrice")
    max_price = LenientFloat(data_key="maxPrice")
    condition = fields.Str(required=False)
    city = fields.Str(required=False)
    search = fields.Str(required=False)
    sort_by = fields.Str(
        data_key="sortBy",
        load_default=DEFAULT_SORT_FIELD,
        validate=validate.OneOf(list(PRODUCT_SORT_FIELDS)),
    )
    sort_order = fields.Str(
        data_key="sortOrder",
        load_default=DEFAULT_SORT_ORDER,
        validate=validate.OneOf(SORT_ORDERS),
    )


class ProductListResultSchema(Schema):
    items = fields.List(fields.Nested(ProductSchema))
    pagination = fields.Nested(PaginationSchema)
