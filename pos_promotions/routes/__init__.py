from ..resources import blp_promotion, blp_coupon


def register_routes(app, api):
    api.register_blueprint(blp_promotion, url_prefix="/api/v1")
    api.register_blueprint(blp_coupon, url_prefix="/api/v1")
