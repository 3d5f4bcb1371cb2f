# models/promotion_model.py
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional, Union


class PromotionType(str, Enum):
    PERCENTAGE_DISCOUNT = "PERCENTAGE_DISCOUNT"
    FIXED_DISCOUNT = "FIXED_DISCOUNT"
    BUY_X_GET_Y = "BUY_X_GET_Y"
    BUNDLE_PRICE = "BUNDLE_PRICE"
    SECOND_HALF_PRICE = "SECOND_HALF_PRICE"
    QUANTITY_DISCOUNT = "QUANTITY_DISCOUNT"
    # Need order context beyond the cart; never produce a discount here
    GIFT_WITH_PURCHASE = "GIFT_WITH_PURCHASE"
    POINTS_MULTIPLIER = "POINTS_MULTIPLIER"
    FREE_SHIPPING = "FREE_SHIPPING"


class DiscountKind(str, Enum):
    PERCENTAGE = "PERCENTAGE"
    FIXED = "FIXED"


class ResultReason(str, Enum):
    APPLIED = "APPLIED"
    NOT_CONFIGURED = "NOT_CONFIGURED"
    BELOW_MIN_PURCHASE = "BELOW_MIN_PURCHASE"
    BELOW_MIN_QUANTITY = "BELOW_MIN_QUANTITY"
    INSUFFICIENT_QUANTITY = "INSUFFICIENT_QUANTITY"
    NO_SAVING = "NO_SAVING"
    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"
    ERROR = "ERROR"


# Older labels still stored on existing promotions
LEGACY_TYPE_ALIASES = {
    "DISCOUNT": PromotionType.PERCENTAGE_DISCOUNT,
    "MEMBER_EXCLUSIVE": PromotionType.PERCENTAGE_DISCOUNT,
    "BUNDLE": PromotionType.BUNDLE_PRICE,
    "GIFT": PromotionType.GIFT_WITH_PURCHASE,
    "POINTS": PromotionType.POINTS_MULTIPLIER,
}

NON_DISCOUNT_TYPES = frozenset({
    PromotionType.GIFT_WITH_PURCHASE,
    PromotionType.POINTS_MULTIPLIER,
    PromotionType.FREE_SHIPPING,
})


def resolve_promotion_type(raw_type: Union[PromotionType, str, None]) -> Optional[PromotionType]:
    """
    Map a stored type label onto a PromotionType.

    Canonical labels map to themselves, legacy labels go through
    LEGACY_TYPE_ALIASES, anything else resolves to None.
    """
    if isinstance(raw_type, PromotionType):
        return raw_type
    if not isinstance(raw_type, str):
        return None

    if raw_type in LEGACY_TYPE_ALIASES:
        return LEGACY_TYPE_ALIASES[raw_type]

    try:
        return PromotionType(raw_type)
    except ValueError:
        return None


def is_percentage(kind: Union[DiscountKind, str, None]) -> bool:
    return kind == DiscountKind.PERCENTAGE


@dataclass(frozen=True)
class PromotionDefinition:
    type: Union[PromotionType, str]
    discount_type: Optional[Union[DiscountKind, str]] = None
    discount_value: Optional[Union[int, float, Decimal]] = None
    min_purchase: Optional[Union[int, float, Decimal]] = None
    max_discount: Optional[Union[int, float, Decimal]] = None


@dataclass(frozen=True)
class CartLineItem:
    product_id: str
    quantity: int
    unit_price: Union[int, float, Decimal]
    subtotal: Union[int, float, Decimal]


@dataclass(frozen=True)
class EvaluationResult:
    applicable: bool
    discount_amount: Decimal = Decimal("0")
    description: str = ""
    reason: ResultReason = ResultReason.APPLIED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "applicable": self.applicable,
            "discount_amount": float(self.discount_amount),
            "description": self.description,
            "reason": self.reason.value,
        }


@dataclass(frozen=True)
class CouponDefinition:
    code: str
    discount_type: Optional[Union[DiscountKind, str]] = None
    discount_value: Optional[Union[int, float, Decimal]] = None
    min_purchase: Optional[Union[int, float, Decimal]] = None
    max_discount: Optional[Union[int, float, Decimal]] = None
    usage_limit: Optional[int] = None
    used_count: int = 0
    per_user_limit: int = 1
    is_active: bool = True
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


@dataclass(frozen=True)
class CouponQuote:
    valid: bool
    message: str
    discount: Decimal = field(default=Decimal("0"))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "message": self.message,
            "discount": float(self.discount),
        }
