# services/coupon_service.py
from datetime import datetime, timezone

from ..constants.service_code import COUPON_MESSAGES
from ..models.promotion_model import CouponQuote, is_percentage
from ..utils.amounts import ZERO, format_amount, is_configured, round_down, to_decimal
from ..utils.logger import Log


class CouponService:
    """Eligibility check and discount quote for a coupon snapshot."""

    @staticmethod
    def is_within_window(start_date, end_date, now):
        """True when `now` falls inside [start_date, end_date]; open ends are unbounded."""
        if start_date is not None and now < start_date:
            return False
        if end_date is not None and now > end_date:
            return False
        return True

    @staticmethod
    def quote(coupon, order_amount, customer_usage_count=0, now=None):
        """
        Validate a coupon against an order and quote its discount.

        Args:
            coupon: CouponDefinition loaded by the caller
            order_amount: number - order total the coupon is applied to
            customer_usage_count: Int - times this customer already redeemed it
            now: datetime used for the validity window (defaults to the current UTC time, naive)

        Returns:
            CouponQuote(valid, message, discount). The discount is rounded down
            to a whole unit.
        """
        log_tag = f"[coupon_service.py][CouponService][quote][{coupon.code}]"
        now = now or datetime.now(timezone.utc).replace(tzinfo=None)

        if not coupon.is_active or not CouponService.is_within_window(coupon.start_date, coupon.end_date, now):
            Log.info(f"{log_tag} inactive or outside validity window")
            return CouponQuote(valid=False, message=COUPON_MESSAGES["NOT_FOUND_OR_EXPIRED"])

        if coupon.usage_limit and coupon.used_count >= coupon.usage_limit:
            Log.info(f"{log_tag} usage limit reached ({coupon.used_count}/{coupon.usage_limit})")
            return CouponQuote(valid=False, message=COUPON_MESSAGES["USAGE_LIMIT_REACHED"])

        if customer_usage_count >= coupon.per_user_limit:
            Log.info(f"{log_tag} per customer limit reached ({customer_usage_count}/{coupon.per_user_limit})")
            return CouponQuote(valid=False, message=COUPON_MESSAGES["CUSTOMER_LIMIT_REACHED"])

        amount = to_decimal(order_amount) or ZERO

        if is_configured(coupon.min_purchase) and amount < to_decimal(coupon.min_purchase):
            return CouponQuote(
                valid=False,
                message=COUPON_MESSAGES["BELOW_MIN_PURCHASE"].format(amount=format_amount(coupon.min_purchase)),
            )

        value = to_decimal(coupon.discount_value) or ZERO
        if is_percentage(coupon.discount_type):
            discount = amount * (value / 100)
        else:
            discount = value

        max_discount = to_decimal(coupon.max_discount)
        if max_discount and discount > max_discount:
            discount = max_discount

        discount = round_down(discount)
        Log.info(f"{log_tag} valid, discount={discount}")

        return CouponQuote(valid=True, message=COUPON_MESSAGES["VALID"], discount=discount)
