# services/promotion_service.py
from decimal import Decimal

from ..constants.service_code import PROMOTION_MESSAGES
from ..models.promotion_model import (
    EvaluationResult,
    PromotionType,
    ResultReason,
    is_percentage,
    resolve_promotion_type,
)
from ..utils.amounts import ZERO, format_amount, is_configured, round_half_up, to_decimal
from ..utils.logger import Log

HALF = Decimal("0.5")
HUNDRED = Decimal("100")

# Buy 3, the cheapest one is free
BUY_X_GET_Y_GROUP_SIZE = 3
MIN_MULTI_ITEM_QUANTITY = 2


def total_quantity(items):
    """Sum of quantities across all cart lines."""
    return sum(int(item.quantity) for item in items)


def flatten_unit_prices(items):
    """
    Collapse the cart into the multiset of unit prices as (price, count) runs,
    cheapest first. Lines sharing a unit price merge into one run.

    Lines of 3 at 100 and 2 at 50 give [(50, 2), (100, 3)].
    """
    counts = {}
    for item in items:
        quantity = int(item.quantity)
        if quantity <= 0:
            continue
        unit_price = to_decimal(item.unit_price)
        counts[unit_price] = counts.get(unit_price, 0) + quantity
    return sorted(counts.items())


def runs_total(runs):
    """Sum of price * count over (price, count) runs."""
    return sum((price * count for price, count in runs), ZERO)


def lowest_prices(runs, count):
    """The `count` cheapest units, as (price, count) runs ascending."""
    taken = []
    remaining = count
    for price, run_count in sorted(runs):
        if remaining <= 0:
            break
        used = min(run_count, remaining)
        taken.append((price, used))
        remaining -= used
    return taken


def paired_half_price_units(runs):
    """
    Order units highest price first and pair them (0,1), (2,3), ...

    Returns the second unit of every complete pair as (price, count) runs;
    those units are sold at half price. A trailing unpaired unit is paid in full.
    """
    half_priced = []
    position = 0
    for price, run_count in sorted(runs, reverse=True):
        # odd positions in [position, position + run_count)
        odd = (position + run_count) // 2 - position // 2
        if odd:
            half_priced.append((price, odd))
        position += run_count
    return half_priced


def _not_applicable(reason, description="", discount_amount=ZERO):
    return EvaluationResult(
        applicable=False,
        discount_amount=discount_amount,
        description=description,
        reason=reason,
    )


def _cap(amount, max_discount):
    cap = to_decimal(max_discount)
    if cap and cap > ZERO and amount > cap:
        return cap
    return amount


class PromotionService:
    """
    Promotion discount engine.

    Evaluates one promotion definition against a cart snapshot and returns an
    EvaluationResult. Pure: no I/O, no shared state, never raises.
    """

    @staticmethod
    def evaluate(promotion, line_items, order_subtotal):
        """
        Decide whether `promotion` applies to the cart and how much it takes off.

        Args:
            promotion: PromotionDefinition
            line_items: iterable of CartLineItem (scoping already applied)
            order_subtotal: number - sum of line subtotals, supplied by caller

        Returns:
            EvaluationResult
        """
        log_tag = "[promotion_service.py][PromotionService][evaluate]"

        try:
            promotion_type = resolve_promotion_type(promotion.type)
            strategy = _STRATEGIES.get(promotion_type)

            if strategy is None:
                Log.debug(f"{log_tag} no discount strategy for type={promotion.type}")
                return _not_applicable(ResultReason.UNSUPPORTED_TYPE)

            items = list(line_items or [])
            subtotal = to_decimal(order_subtotal) or ZERO

            result = strategy(promotion, items, subtotal)

            # Never discount more than the order is worth
            ceiling = max(subtotal, ZERO)
            if result.discount_amount > ceiling:
                result = EvaluationResult(
                    applicable=result.applicable,
                    discount_amount=ceiling,
                    description=result.description,
                    reason=result.reason,
                )

            Log.info(
                f"{log_tag} type={promotion_type.value} applicable={result.applicable} "
                f"discount={result.discount_amount} reason={result.reason.value}"
            )
            return result

        except Exception as e:
            Log.error(f"{log_tag} Error evaluating promotion type={getattr(promotion, 'type', None)}: {str(e)}")
            return _not_applicable(ResultReason.ERROR)

    @staticmethod
    def check_min_purchase(promotion, order_subtotal):
        """
        Minimum-spend gate shared by the amount based promotions.

        Returns a not-applicable result when the order is below the threshold,
        otherwise None. A zero or missing threshold is not enforced.
        """
        if not is_configured(promotion.min_purchase):
            return None

        min_purchase = to_decimal(promotion.min_purchase)
        if order_subtotal < min_purchase:
            return _not_applicable(
                ResultReason.BELOW_MIN_PURCHASE,
                PROMOTION_MESSAGES["BELOW_MIN_PURCHASE"].format(amount=format_amount(min_purchase)),
            )
        return None

    @staticmethod
    def percentage_discount(promotion, items, order_subtotal):
        if not is_configured(promotion.discount_value):
            return _not_applicable(ResultReason.NOT_CONFIGURED)

        gate = PromotionService.check_min_purchase(promotion, order_subtotal)
        if gate is not None:
            return gate

        value = to_decimal(promotion.discount_value)
        if is_percentage(promotion.discount_type):
            raw = round_half_up(order_subtotal * value / HUNDRED)
            description = PROMOTION_MESSAGES["PERCENTAGE_OFF"].format(value=format_amount(value))
        else:
            raw = round_half_up(value)
            description = PROMOTION_MESSAGES["AMOUNT_OFF"].format(value=format_amount(value))

        return EvaluationResult(
            applicable=True,
            discount_amount=_cap(raw, promotion.max_discount),
            description=description,
        )

    @staticmethod
    def fixed_discount(promotion, items, order_subtotal):
        gate = PromotionService.check_min_purchase(promotion, order_subtotal)
        if gate is not None:
            return gate

        # Missing value still applies, it just takes nothing off
        if not is_configured(promotion.discount_value):
            return EvaluationResult(applicable=True)

        value = to_decimal(promotion.discount_value)
        return EvaluationResult(
            applicable=True,
            discount_amount=max(min(value, order_subtotal), ZERO),
            description=PROMOTION_MESSAGES["AMOUNT_OFF"].format(value=format_amount(value)),
        )

    @staticmethod
    def buy_x_get_y(promotion, items, order_subtotal):
        quantity = total_quantity(items)
        if quantity < MIN_MULTI_ITEM_QUANTITY:
            return _not_applicable(ResultReason.INSUFFICIENT_QUANTITY, PROMOTION_MESSAGES["MIN_TWO_ITEMS"])

        free_count = quantity // BUY_X_GET_Y_GROUP_SIZE
        description = PROMOTION_MESSAGES["BUY_THREE_GET_ONE"].format(count=free_count)
        if free_count == 0:
            return _not_applicable(ResultReason.INSUFFICIENT_QUANTITY, description)

        free_units = lowest_prices(flatten_unit_prices(items), free_count)
        return EvaluationResult(
            applicable=True,
            discount_amount=round_half_up(runs_total(free_units)),
            description=description,
        )

    @staticmethod
    def bundle_price(promotion, items, order_subtotal):
        if not is_configured(promotion.discount_value):
            return _not_applicable(ResultReason.NOT_CONFIGURED)

        value = to_decimal(promotion.discount_value)
        description = PROMOTION_MESSAGES["BUNDLE_PRICE"].format(value=format_amount(value))
        saving = order_subtotal - value

        if saving <= ZERO:
            return _not_applicable(ResultReason.NO_SAVING, description)

        return EvaluationResult(
            applicable=True,
            discount_amount=round_half_up(saving),
            description=description,
        )

    @staticmethod
    def second_half_price(promotion, items, order_subtotal):
        if total_quantity(items) < MIN_MULTI_ITEM_QUANTITY:
            return _not_applicable(ResultReason.INSUFFICIENT_QUANTITY, PROMOTION_MESSAGES["MIN_TWO_ITEMS"])

        half_priced = paired_half_price_units(flatten_unit_prices(items))
        discount = runs_total(half_priced) * HALF

        return EvaluationResult(
            applicable=True,
            discount_amount=round_half_up(discount),
            description=PROMOTION_MESSAGES["SECOND_HALF_PRICE"],
        )

    @staticmethod
    def quantity_discount(promotion, items, order_subtotal):
        if not is_configured(promotion.discount_value):
            return _not_applicable(ResultReason.NOT_CONFIGURED)

        # min_purchase counts units for this promotion type, not money
        if is_configured(promotion.min_purchase):
            min_quantity = to_decimal(promotion.min_purchase)
            if total_quantity(items) < min_quantity:
                return _not_applicable(
                    ResultReason.BELOW_MIN_QUANTITY,
                    PROMOTION_MESSAGES["BELOW_MIN_QUANTITY"].format(quantity=format_amount(min_quantity)),
                )

        value = to_decimal(promotion.discount_value)
        if is_percentage(promotion.discount_type):
            raw = round_half_up(order_subtotal * value / HUNDRED)
            description = PROMOTION_MESSAGES["QUANTITY_PERCENTAGE_OFF"].format(value=format_amount(value))
        else:
            raw = round_half_up(value)
            description = PROMOTION_MESSAGES["QUANTITY_AMOUNT_OFF"].format(value=format_amount(value))

        return EvaluationResult(
            applicable=True,
            discount_amount=_cap(raw, promotion.max_discount),
            description=description,
        )


_STRATEGIES = {
    PromotionType.PERCENTAGE_DISCOUNT: PromotionService.percentage_discount,
    PromotionType.FIXED_DISCOUNT: PromotionService.fixed_discount,
    PromotionType.BUY_X_GET_Y: PromotionService.buy_x_get_y,
    PromotionType.BUNDLE_PRICE: PromotionService.bundle_price,
    PromotionType.SECOND_HALF_PRICE: PromotionService.second_half_price,
    PromotionType.QUANTITY_DISCOUNT: PromotionService.quantity_discount,
}
