"""
Shared pytest fixtures
"""
import copy
from datetime import date, time
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from src.app import app, get_store
from src.model.ReceiptItemModel import ReceiptItem
from src.model.ReceiptModel import Receipt
from src.store.backend import MemoryBackend
from src.store.receipts import ReceiptStore

TARGET_PAYLOAD = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

CORNER_MARKET_PAYLOAD = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
    ],
    "total": "9.00",
}


@pytest.fixture
def target_payload():
    return copy.deepcopy(TARGET_PAYLOAD)


@pytest.fixture
def corner_market_payload():
    return copy.deepcopy(CORNER_MARKET_PAYLOAD)


@pytest.fixture
def make_receipt():
    """Factory for receipts that score nothing unless a field is overridden"""
    def _make(**overrides):
        fields = dict(
            retailer="",
            purchase_date=date(2022, 1, 2),
            purchase_time=time(9, 0),
            items=[],
            total=Decimal("1.01"),
        )
        fields.update(overrides)
        return Receipt(**fields)
    return _make


@pytest.fixture
def item():
    def _item(description, price):
        return ReceiptItem(short_description=description, price=Decimal(price))
    return _item


@pytest.fixture
def backend():
    return MemoryBackend()


@pytest.fixture
def store(backend):
    return ReceiptStore(backend)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    del app.dependency_overrides[get_store]
