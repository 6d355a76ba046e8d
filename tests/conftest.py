import random
from datetime import date

import pytest

from adapters.output.receipts.memory_receipt_adapter import InMemoryReceiptAdapter
from app.domain.entities.hotel import Hotel
from app.domain.entities.room import Room
from app.domain.entities.user import PaymentDetails, User
from app.domain.services.cart_service import Cart
from app.domain.services.catalog_service import Catalog
from app.domain.services.checkout_service import CheckoutService
from app.domain.services.receipt_writer import ReceiptWriter

TODAY = date(2024, 1, 1)


@pytest.fixture
def hotel():
    return Hotel("Test Hotel", "+15550000", 3, "Springfield", "A hotel for tests")


@pytest.fixture
def room(hotel):
    return Room(hotel, "Standard", 100, 2, "Queen bed")


@pytest.fixture
def catalog(hotel, room):
    catalog = Catalog()
    catalog.add_hotel(hotel)
    catalog.add_room(room)
    return catalog


@pytest.fixture
def cart():
    return Cart()


@pytest.fixture
def receipt_port():
    return InMemoryReceiptAdapter()


@pytest.fixture
def receipt_writer(receipt_port):
    return ReceiptWriter(receipt_port, today=lambda: TODAY, rng=random.Random(7))


@pytest.fixture
def checkout_service(cart, receipt_writer):
    return CheckoutService(cart, receipt_writer, today=lambda: TODAY)


@pytest.fixture
def user():
    return User(email="jane.doe@example.com", password="secret")


@pytest.fixture
def payment():
    return PaymentDetails(name="Jane", surname="Doe", card_number="1234-5678-9012-3456")
