"""
Pytest fixtures for Frescos tests.
"""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from frescos import stock
from frescos.adapters.catalog import reset_catalog
from frescos.models import (
    Buyer,
    Category,
    Product,
    Representative,
    Section,
    Seller,
    Warehouse,
)


# Fixed "today" for every test; availability depends on it
TODAY = date(2026, 3, 2)


@pytest.fixture(autouse=True)
def fixed_clock(monkeypatch):
    """Pin frescos.clock.today to TODAY."""
    monkeypatch.setattr('frescos.clock.today', lambda: TODAY)
    return TODAY


@pytest.fixture(autouse=True)
def catalog():
    """Fresh catalog backend per test."""
    reset_catalog()
    yield
    reset_catalog()


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def in_weeks(today):
    """Date n weeks after today."""
    return lambda n: today + timedelta(weeks=n)


@pytest.fixture
def seller(db):
    """Create a test seller."""
    return Seller.objects.create(
        name='Hortifruti Vale Verde',
        cpf='12345678901',
        rating=Decimal('4.50'),
    )


@pytest.fixture
def buyer(db):
    """Create a test buyer."""
    return Buyer.objects.create(name='Mercado Central', cpf='10987654321')


@pytest.fixture
def warehouse(db):
    """Create a test warehouse."""
    return Warehouse.objects.create(
        name='Armazém Cajamar',
        address='Rodovia Anhanguera, km 33',
        city='Cajamar',
        state='SP',
        postal_code='07750-000',
    )


@pytest.fixture
def other_warehouse(db):
    return Warehouse.objects.create(name='Armazém Louveira', city='Louveira', state='SP')


@pytest.fixture
def representative(db, warehouse):
    """Representative working at the test warehouse."""
    return Representative.objects.create(name='Ana Souza', warehouse=warehouse)


@pytest.fixture
def fresh_section(db, warehouse):
    """FRESH section with 1000 volume units."""
    return Section.objects.create(
        description='Setor Frescos A',
        category=Category.FRESH,
        total_size=Decimal('1000'),
        temperature=Decimal('10.00'),
        warehouse=warehouse,
    )


@pytest.fixture
def frozen_section(db, warehouse):
    """FROZEN section with 1000 volume units."""
    return Section.objects.create(
        description='Setor Congelados',
        category=Category.FROZEN,
        total_size=Decimal('1000'),
        temperature=Decimal('-18.00'),
        warehouse=warehouse,
    )


@pytest.fixture
def product(db, seller):
    """FRESH product, price 10.00, one volume unit each."""
    return Product.objects.create(
        title='Alface Crespa',
        category=Category.FRESH,
        unit_volume=Decimal('1.000'),
        unit_weight=Decimal('0.300'),
        price=Decimal('10.00'),
        seller=seller,
    )


@pytest.fixture
def other_product(db, seller):
    """Second FRESH product, price 2.50."""
    return Product.objects.create(
        title='Rúcula',
        category=Category.FRESH,
        unit_volume=Decimal('0.500'),
        price=Decimal('2.50'),
        seller=seller,
    )


@pytest.fixture
def frozen_product(db, seller):
    return Product.objects.create(
        title='Polpa de Acerola',
        category=Category.FROZEN,
        unit_volume=Decimal('0.200'),
        price=Decimal('4.90'),
        seller=seller,
    )


@pytest.fixture
def make_batch(fresh_section):
    """Factory: admit a batch into the FRESH section."""
    counter = iter(range(1, 1000))

    def _make(product, quantity, due_date, section=None, batch_number=None):
        return stock.admit(
            product,
            section or fresh_section,
            quantity,
            batch_number=batch_number or f'LOT-{next(counter):03d}',
            due_date=due_date,
        )

    return _make
