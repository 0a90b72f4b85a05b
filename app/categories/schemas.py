from marshmallow import Schema, fields


class SubcategorySchema(Schema):
    name = fields.Str()
    count = fields.Int()


class CategoryTreeSchema(Schema):
    name = fields.Str()
    slug = fields.Str()
    description = fields.Str()
    count = fields.Int()
    subcategories = fields.List(fields.Nested(SubcategorySchema))
