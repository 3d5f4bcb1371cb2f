# schemas/promotion_schema.py

from marshmallow import Schema, fields, validate, post_load

from ..models.promotion_model import (
    CartLineItem,
    CouponDefinition,
    DiscountKind,
    PromotionDefinition,
)


def non_negative(field_name):
    return validate.Range(min=0, error=f"{field_name} must be a positive number")


class PromotionSchema(Schema):
    """Promotion definition as stored by the promotion configuration."""

    # Free-form on purpose: unknown or legacy labels evaluate as not applicable
    type = fields.Str(
        required=True,
        validate=validate.Length(min=1, max=50),
        error_messages={"required": "Promotion type is required"}
    )

    discount_type = fields.Str(
        required=False,
        allow_none=True,
        load_default=None,
        validate=validate.OneOf(
            [kind.value for kind in DiscountKind],
            error="Discount type must be 'PERCENTAGE' or 'FIXED'"
        )
    )

    discount_value = fields.Float(
        required=False,
        allow_none=True,
        load_default=None,
        validate=non_negative("Discount value"),
        error_messages={"invalid": "Discount value must be a number"}
    )

    min_purchase = fields.Float(
        required=False,
        allow_none=True,
        load_default=None,
        validate=non_negative("Minimum purchase")
    )

    max_discount = fields.Float(
        required=False,
        allow_none=True,
        load_default=None,
        validate=non_negative("Maximum discount")
    )

    @post_load
    def make_promotion(self, data, **kwargs):
        return PromotionDefinition(**data)


class CartLineItemSchema(Schema):
    product_id = fields.Str(required=True, error_messages={"required": "product_id is required"})
    quantity = fields.Int(
        required=True,
        strict=True,
        validate=validate.Range(min=1, error="Quantity must be at least 1"),
    )
    unit_price = fields.Float(required=True, validate=non_negative("Unit price"))
    subtotal = fields.Float(required=True, validate=non_negative("Subtotal"))

    @post_load
    def make_line_item(self, data, **kwargs):
        return CartLineItem(**data)


class PromotionEvaluateSchema(Schema):
    """Request body for POST /promotions/evaluate."""
    promotion = fields.Nested(PromotionSchema, required=True)
    items = fields.List(fields.Nested(CartLineItemSchema), required=True)
    order_subtotal = fields.Float(
        required=False,
        allow_none=True,
        load_default=None,
        validate=non_negative("Order subtotal")
    )


class CouponSchema(Schema):
    code = fields.Str(required=True, validate=validate.Length(min=3, max=20))

    discount_type = fields.Str(
        required=False,
        allow_none=True,
        load_default=None,
        validate=validate.OneOf([kind.value for kind in DiscountKind])
    )
    discount_value = fields.Float(required=True, validate=non_negative("Discount value"))
    min_purchase = fields.Float(required=False, allow_none=True, load_default=None, validate=non_negative("Minimum purchase"))
    max_discount = fields.Float(required=False, allow_none=True, load_default=None, validate=non_negative("Maximum discount"))

    usage_limit = fields.Int(required=False, allow_none=True, load_default=None)
    used_count = fields.Int(required=False, load_default=0, validate=validate.Range(min=0))
    per_user_limit = fields.Int(required=False, load_default=1, validate=validate.Range(min=0))

    is_active = fields.Bool(required=False, load_default=True)
    start_date = fields.NaiveDateTime(required=False, allow_none=True, load_default=None)
    end_date = fields.NaiveDateTime(required=False, allow_none=True, load_default=None)

    @post_load
    def make_coupon(self, data, **kwargs):
        return CouponDefinition(**data)


class CouponQuoteRequestSchema(Schema):
    """Request body for POST /coupons/quote."""
    coupon = fields.Nested(CouponSchema, required=True)
    order_amount = fields.Float(required=True, validate=non_negative("Order amount"))
    customer_usage_count = fields.Int(required=False, load_default=0, validate=validate.Range(min=0))
