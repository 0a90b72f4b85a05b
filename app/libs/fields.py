from marshmallow import fields, ValidationError


class LenientFloat(fields.Float):
    """Float field that treats unparseable input as absent.

    Used for price bounds: a bound such as ``priceMin=abc`` (or ``nan``) is
    ignored rather than rejecting the whole request.
    """

    def _deserialize(self, value, attr, data, **kwargs):
        try:
            return super()._deserialize(value, attr, data, **kwargs)
        except ValidationError:
            return None
