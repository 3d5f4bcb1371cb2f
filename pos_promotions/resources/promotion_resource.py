from flask import request
from flask.views import MethodView
from flask_smorest import Blueprint

from ..constants.service_code import HTTP_STATUS_CODES
from ..models.promotion_model import LEGACY_TYPE_ALIASES, NON_DISCOUNT_TYPES, PromotionType
from ..schemas.promotion_schema import (
    CouponQuoteRequestSchema,
    PromotionEvaluateSchema,
)
from ..services.coupon_service import CouponService
from ..services.promotion_service import PromotionService
from ..utils.amounts import ZERO, to_decimal
from ..utils.helpers import make_log_tag
from ..utils.json_response import prepared_response
from ..utils.logger import Log


blp_promotion = Blueprint("Promotion", __name__, description="Promotion evaluation")
blp_coupon = Blueprint("Coupon", __name__, description="Coupon quotes")


# -----------------------------PROMOTION----------------------------------
@blp_promotion.route("/promotions/evaluate", methods=["POST"])
class PromotionEvaluateResource(MethodView):

    @blp_promotion.arguments(PromotionEvaluateSchema, location="json")
    @blp_promotion.response(HTTP_STATUS_CODES["OK"])
    @blp_promotion.doc(
        summary="Evaluate a promotion against a cart",
        description="""
            Runs the promotion engine for a single promotion and cart snapshot.

            • order_subtotal is optional; when omitted it is the sum of the line subtotals.
            • A promotion that does not apply still answers 200 with applicable=false.
        """,
    )
    def post(self, request_data):
        log_tag = make_log_tag(
            "promotion_resource.py",
            "PromotionEvaluateResource",
            "post",
            request.remote_addr,
        )

        promotion = request_data["promotion"]
        items = request_data["items"]
        order_subtotal = request_data.get("order_subtotal")
        if order_subtotal is None:
            order_subtotal = sum((to_decimal(item.subtotal) for item in items), ZERO)

        Log.info(f"{log_tag} evaluating type={promotion.type} lines={len(items)} subtotal={order_subtotal}")

        result = PromotionService.evaluate(promotion, items, order_subtotal)

        return prepared_response(
            True,
            "OK",
            "Promotion applied" if result.applicable else "Promotion not applicable",
            data=result.to_dict(),
        )


@blp_promotion.route("/promotions/types", methods=["GET"])
class PromotionTypesResource(MethodView):

    @blp_promotion.response(HTTP_STATUS_CODES["OK"])
    def get(self):
        """List supported promotion types and the legacy labels they absorb."""
        types = [
            {
                "type": promotion_type.value,
                "discount": promotion_type not in NON_DISCOUNT_TYPES,
                "aliases": sorted(
                    alias for alias, target in LEGACY_TYPE_ALIASES.items() if target is promotion_type
                ),
            }
            for promotion_type in PromotionType
        ]
        return prepared_response(True, "OK", "Promotion types", data=types)


# -----------------------------COUPON----------------------------------
@blp_coupon.route("/coupons/quote", methods=["POST"])
class CouponQuoteResource(MethodView):

    @blp_coupon.arguments(CouponQuoteRequestSchema, location="json")
    @blp_coupon.response(HTTP_STATUS_CODES["OK"])
    def post(self, request_data):
        """Check a coupon against an order amount and quote the discount."""
        coupon = request_data["coupon"]
        log_tag = make_log_tag(
            "promotion_resource.py",
            "CouponQuoteResource",
            "post",
            request.remote_addr,
            code=coupon.code,
        )

        quote = CouponService.quote(
            coupon,
            request_data["order_amount"],
            customer_usage_count=request_data.get("customer_usage_count", 0),
        )
        Log.info(f"{log_tag} valid={quote.valid}")

        if not quote.valid:
            return prepared_response(False, "BAD_REQUEST", quote.message, data=quote.to_dict())

        return prepared_response(True, "OK", quote.message, data=quote.to_dict())
