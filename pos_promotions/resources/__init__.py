from .promotion_resource import blp_promotion, blp_coupon
