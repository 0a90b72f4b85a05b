from marshmallow import Schema, fields, pre_load, EXCLUDE

from main.config import settings

from .errors import ValidationError

PAGINATION_KEYS = ("page", "limit")


class PaginationQueryArgs(Schema):
    class Meta:
        unknown = EXCLUDE

    page = fields.Int(required=False, load_default=1)
    limit = fields.Int(required=False, load_default=settings.SEARCH_DEFAULT_LIMIT)

    @pre_load
    def clean_pagination(self, data, **kwargs):
        """Blank page/limit fall back to their defaults.

        Anything else that is not an integer is rejected with the same error
        the paginator raises for out-of-range values.
        """
        cleaned = {
            key: data[key]
            for key in data
            if not (key in PAGINATION_KEYS and data[key] == "")
        }
        for key in PAGINATION_KEYS:
            if key in cleaned and not _is_integer(cleaned[key]):
                raise ValidationError("Invalid pagination parameters")
        return cleaned


def _is_integer(value):
    if isinstance(value, bool):
        return False
    try:
        int(value)
    except (TypeError, ValueError):
        return False
    return True


class PaginationSchema(Schema):
    page = fields.Int()
    limit = fields.Int()
    total_items = fields.Int(data_key="totalItems")
    total_pages = fields.Int(data_key="totalPages")
