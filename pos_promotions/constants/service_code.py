HTTP_STATUS_CODES = {
    "OK": 200,
    "BAD_REQUEST": 400,
}

ERROR_MESSAGES = {
    "VALIDATION_FAILED": "Validation failed. Please check your inputs.",
}

# Customer-facing promotion texts (zh-TW, as printed on receipts)
PROMOTION_MESSAGES = {
    "BELOW_MIN_PURCHASE": "未達最低消費 ${amount}",
    "BELOW_MIN_QUANTITY": "需購買 {quantity} 件以上",
    "MIN_TWO_ITEMS": "需至少購買 2 件",
    "PERCENTAGE_OFF": "{value}% 折扣",
    "AMOUNT_OFF": "折扣 ${value}",
    "BUY_THREE_GET_ONE": "買3送1，免費 {count} 件",
    "BUNDLE_PRICE": "組合價 ${value}",
    "SECOND_HALF_PRICE": "第二件半價",
    "QUANTITY_PERCENTAGE_OFF": "數量折扣：{value}%",
    "QUANTITY_AMOUNT_OFF": "數量折扣：${value}",
}

COUPON_MESSAGES = {
    "NOT_FOUND_OR_EXPIRED": "優惠券不存在或已過期",
    "USAGE_LIMIT_REACHED": "此優惠券已達使用上限",
    "CUSTOMER_LIMIT_REACHED": "您已達此優惠券的使用上限",
    "BELOW_MIN_PURCHASE": "訂單金額需滿 {amount} 元才能使用此優惠券",
    "VALID": "優惠券有效",
}
