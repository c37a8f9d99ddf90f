"""
Tests for section capacity and stock admission.
"""

from decimal import Decimal

import pytest

from frescos import stock, StockError, NotFoundError
from frescos.models import BatchStock, Category, Section, StockMove


pytestmark = pytest.mark.django_db


class TestSectionCapacity:
    """Tests for category and volume rules."""

    def test_category_permitted(self):
        """Only exact category matches are permitted."""
        assert stock.category_permitted(Category.FRESH, Category.FRESH)
        assert not stock.category_permitted(Category.FRESH, Category.FROZEN)
        assert not stock.category_permitted(Category.REFRIGERATED, Category.FRESH)

    def test_used_volume_empty_section(self, fresh_section):
        """An empty section uses no volume."""
        assert stock.used_volume(fresh_section) == Decimal('0')
        assert stock.free_volume(fresh_section) == Decimal('1000')

    def test_used_volume(self, product, other_product, make_batch, in_weeks, fresh_section):
        """used = Σ quantity × unit_volume."""
        make_batch(product, 100, in_weeks(10))        # 100 × 1.0
        make_batch(other_product, 40, in_weeks(10))   # 40 × 0.5

        assert stock.used_volume(fresh_section) == Decimal('120')
        assert stock.free_volume(fresh_section) == Decimal('880')

    def test_consumption_frees_volume(self, product, make_batch, in_weeks, fresh_section):
        """Consumed units no longer occupy the section."""
        make_batch(product, 100, in_weeks(10))
        stock.consume(product, 30)

        assert stock.used_volume(fresh_section) == Decimal('70')

    def test_fits(self, product, fresh_section, make_batch, in_weeks):
        """fits compares incoming volume with free volume."""
        make_batch(product, 900, in_weeks(10))

        assert stock.fits(product, 100, fresh_section)
        assert not stock.fits(product, 101, fresh_section)

    def test_is_valid_rejects_category_regardless_of_volume(self, frozen_product, fresh_section):
        """Category mismatch is invalid even when volume fits."""
        assert stock.fits(frozen_product, 1, fresh_section)
        assert not stock.is_valid(frozen_product, 1, fresh_section)

    def test_check_category_first(self, frozen_product, fresh_section):
        """check() reports CATEGORY_MISMATCH before capacity."""
        with pytest.raises(StockError) as exc:
            stock.check(frozen_product, 1_000_000, fresh_section)

        assert exc.value.code == 'CATEGORY_MISMATCH'

    def test_check_capacity(self, product, fresh_section):
        """check() reports required and free volume."""
        with pytest.raises(StockError) as exc:
            stock.check(product, 1001, fresh_section)

        assert exc.value.code == 'CAPACITY_EXCEEDED'
        assert exc.value.data['required'] == Decimal('1001')
        assert exc.value.data['free'] == Decimal('1000')

    def test_unknown_section(self, product):
        """Unknown section id raises SECTION_NOT_FOUND."""
        with pytest.raises(NotFoundError) as exc:
            stock.fits(product, 1, 999999)

        assert exc.value.code == 'SECTION_NOT_FOUND'


class TestAdmit:
    """Tests for stock.admit()."""

    def test_admit_creates_batch_and_move(self, product, fresh_section, in_weeks):
        """Admit creates the batch and one positive move."""
        batch = stock.admit(
            product, fresh_section, 100,
            batch_number='LOT-2026-0302-A',
            due_date=in_weeks(10),
        )

        assert batch.quantity == 100
        assert batch.section == fresh_section
        assert batch.moves.count() == 1
        move = batch.moves.get()
        assert move.delta == 100
        assert move.reason == 'Recebimento'

    def test_admit_accepts_ids(self, product, fresh_section, in_weeks):
        """Product and section may be passed as ids."""
        batch = stock.admit(
            product.pk, fresh_section.pk, 5,
            batch_number='LOT-IDS',
            due_date=in_weeks(10),
        )

        assert batch.product_id == product.pk

    def test_admit_capacity_exceeded(self, product, fresh_section, in_weeks):
        """Nothing is written when the batch does not fit."""
        with pytest.raises(StockError) as exc:
            stock.admit(product, fresh_section, 1001, batch_number='BIG', due_date=in_weeks(10))

        assert exc.value.code == 'CAPACITY_EXCEEDED'
        assert BatchStock.objects.count() == 0
        assert StockMove.objects.count() == 0

    def test_admit_category_mismatch(self, frozen_product, fresh_section, in_weeks):
        """A frozen product never enters a fresh section."""
        with pytest.raises(StockError) as exc:
            stock.admit(frozen_product, fresh_section, 1, batch_number='X', due_date=in_weeks(10))

        assert exc.value.code == 'CATEGORY_MISMATCH'
        assert BatchStock.objects.count() == 0

    def test_admit_invalid_quantity(self, product, fresh_section, in_weeks):
        with pytest.raises(StockError) as exc:
            stock.admit(product, fresh_section, 0, batch_number='Z', due_date=in_weeks(10))

        assert exc.value.code == 'INVALID_QUANTITY'

    def test_admit_with_representative(self, product, fresh_section, representative, in_weeks):
        """A representative of the section's warehouse may admit stock."""
        batch = stock.admit(
            product, fresh_section, 10,
            batch_number='REP-1',
            due_date=in_weeks(10),
            representative=representative,
        )

        assert batch.quantity == 10

    def test_admit_representative_not_permitted(self, product, fresh_section, other_warehouse, in_weeks):
        """A representative of another warehouse is rejected."""
        outsider = other_warehouse.representatives.create(name='Bruno Lima')

        with pytest.raises(StockError) as exc:
            stock.admit(
                product, fresh_section, 10,
                batch_number='REP-2',
                due_date=in_weeks(10),
                representative=outsider,
            )

        assert exc.value.code == 'REPRESENTATIVE_NOT_PERMITTED'
        assert BatchStock.objects.count() == 0

    def test_permitted_representative(self, representative, warehouse, other_warehouse):
        assert stock.permitted_representative(representative, warehouse)
        assert stock.permitted_representative(representative.pk, warehouse.pk)
        assert not stock.permitted_representative(representative, other_warehouse)

    def test_sections_are_independent(self, product, fresh_section, warehouse, in_weeks):
        """Volume used in one section does not count against another."""
        small = Section.objects.create(
            description='Setor Frescos B',
            category=Category.FRESH,
            total_size=Decimal('10'),
            temperature=Decimal('8.00'),
            warehouse=warehouse,
        )
        stock.admit(product, fresh_section, 900, batch_number='A', due_date=in_weeks(10))

        batch = stock.admit(product, small, 10, batch_number='B', due_date=in_weeks(10))

        assert batch.section == small
        assert stock.free_volume(small) == Decimal('0')
