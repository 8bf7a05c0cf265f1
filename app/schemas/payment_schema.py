from marshmallow import Schema, fields, validates, post_load, ValidationError, EXCLUDE

from app.utils.validators import parse_amount, validate_amount, validate_phone_number


class InitiateTransactionSchema(Schema):
    """Merchant pay initiation schema"""

    class Meta:
        unknown = EXCLUDE

    amount = fields.Raw(required=True)
    customerMSISDN = fields.Str(required=True)
    # Forwarded as given; only amount and customerMSISDN are validated
    descriptionText = fields.Raw(required=False, allow_none=True)
    correlationId = fields.Raw(required=False, allow_none=True)

    @validates('amount')
    def check_amount(self, value, **kwargs):
        is_valid, message = validate_amount(value)
        if not is_valid:
            raise ValidationError(message)

    @validates('customerMSISDN')
    def check_customer_msisdn(self, value, **kwargs):
        is_valid, message = validate_phone_number(value)
        if not is_valid:
            raise ValidationError(message)

    @post_load
    def coerce_fields(self, data, **kwargs):
        data['amount'] = parse_amount(data['amount'])
        for key in ('descriptionText', 'correlationId'):
            if data.get(key) is not None:
                data[key] = str(data[key])
        return data
