from marshmallow import ValidationError

from pos_promotions.utils.helpers import make_log_tag


def test_validation_error_handler_returns_bad_request(app):
    @app.route("/raise-validation")
    def raise_validation():
        raise ValidationError({"discount_value": ["Not a valid number."]})

    response = app.test_client().get("/raise-validation")

    assert response.status_code == 400
    body = response.get_json()
    assert body["error"] == "Validation Error"
    assert body["errors"] == {"discount_value": ["Not a valid number."]}


def test_type_error_handler_returns_bad_request(app):
    @app.route("/raise-type")
    def raise_type():
        raise TypeError("amount must be int | float | str | Decimal")

    response = app.test_client().get("/raise-type")

    assert response.status_code == 400
    assert response.get_json()["message"] == "amount must be int | float | str | Decimal"


def test_make_log_tag_appends_context():
    tag = make_log_tag("promotion_resource.py", "CouponQuoteResource", "post", "127.0.0.1", code="SAVE10")

    assert tag == "[promotion_resource.py][CouponQuoteResource][post][ip:127.0.0.1][code:SAVE10]"
