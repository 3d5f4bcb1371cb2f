"""Root conftest — shared test configuration."""

import os
import tempfile

import pytest

# Keep test runs from writing into storage/logs
os.environ.setdefault("APP_LOG_DIR", tempfile.mkdtemp(prefix="pos-promotions-logs-"))
os.environ.setdefault("APP_ENV", "testing")

from pos_promotions import create_promotion_app  # noqa: E402
from pos_promotions.config import TestingConfig  # noqa: E402
from pos_promotions.models.promotion_model import CartLineItem, PromotionDefinition  # noqa: E402


@pytest.fixture
def app():
    return create_promotion_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_promotion():
    def _make(**overrides):
        fields = {
            "type": "PERCENTAGE_DISCOUNT",
            "discount_type": "PERCENTAGE",
            "discount_value": 10,
            "min_purchase": None,
            "max_discount": None,
        }
        fields.update(overrides)
        return PromotionDefinition(**fields)
    return _make


@pytest.fixture
def make_item():
    def _make(**overrides):
        fields = {
            "product_id": "product-1",
            "quantity": 1,
            "unit_price": 100,
            "subtotal": 100,
        }
        fields.update(overrides)
        return CartLineItem(**fields)
    return _make
