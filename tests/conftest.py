"""
Pytest fixtures and configuration for the Food Order API tests

This file provides shared fixtures that can be used across all test modules.

Author: TM3
Date: 2025-10-17
"""
import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from order_api.api.dependencies import get_order_usecase, get_product_usecase
from order_api.domain.order import Order, OrderItem
from order_api.domain.product import Product
from order_api.main import app
from order_api.services.interfaces import OrderUseCase, ProductUseCase

TESTDATA_DIR = Path(__file__).parent / "testdata"


@pytest.fixture
def read_testdata():
    """Returns a reader for the raw content of files under tests/testdata"""
    def _read(name: str) -> str:
        return (TESTDATA_DIR / name).read_text()
    return _read


@pytest.fixture
def load_testdata(read_testdata):
    """Returns a loader for the parsed JSON content of files under tests/testdata"""
    def _load(name: str):
        return json.loads(read_testdata(name))
    return _load


@pytest.fixture
def product_usecase():
    """ProductUseCase double; unexpected calls fail through assert_not_called"""
    return Mock(spec=ProductUseCase)


@pytest.fixture
def order_usecase():
    return Mock(spec=OrderUseCase)


@pytest.fixture
def client(product_usecase, order_usecase):
    """
    TestClient wired to the use-case doubles

    Scope: function (overrides are cleared after each test)
    """
    app.dependency_overrides[get_product_usecase] = lambda: product_usecase
    app.dependency_overrides[get_order_usecase] = lambda: order_usecase
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_product():
    """
    Provides the product used across API and service tests
    """
    return Product(
        id=222,
        name="Batata Frita",
        sku_id="333",
        description="Batata canoa",
        category="Acompanhamento",
        price=Decimal("9.99"),
        created_at=datetime(2025, 10, 1, 12, 0, 0),
        updated_at=datetime(2025, 10, 1, 12, 0, 0)
    )


@pytest.fixture
def sample_order(sample_product):
    """
    Provides an order with one item
    """
    return Order(
        id=123,
        items=[OrderItem(id=999, quantity=1, type="UNIT", product=sample_product)],
        coupon="APP10",
        total_amount=Decimal("9.99"),
        status="PAID",
        created_at=datetime(2025, 10, 2, 8, 30, 0),
        customer_cpf="52998224725"
    )
