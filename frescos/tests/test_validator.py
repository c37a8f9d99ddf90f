"""
Tests for order validation.
"""

import pytest

from frescos import stock, StockError, NotFoundError
from frescos.protocols import OrderLine


pytestmark = pytest.mark.django_db


class TestInsufficientProducts:
    """Tests for stock.insufficient_products()."""

    def test_all_satisfied(self, product, other_product, make_batch, in_weeks):
        """Empty set when every line fits available stock."""
        make_batch(product, 10, in_weeks(10))
        make_batch(other_product, 10, in_weeks(10))

        lines = [OrderLine(product.pk, 10), OrderLine(other_product.pk, 1)]
        assert stock.insufficient_products(lines) == set()

    def test_reports_failing_product(self, product, other_product, make_batch, in_weeks):
        """Only the product lacking stock is reported."""
        make_batch(product, 10, in_weeks(10))
        make_batch(other_product, 5, in_weeks(10))

        lines = [(product.pk, 10), (other_product.pk, 6)]
        assert stock.insufficient_products(lines) == {other_product.pk}

    def test_distinct_ids(self, product, make_batch, in_weeks):
        """A product failing on several lines appears once."""
        make_batch(product, 1, in_weeks(10))

        lines = [(product.pk, 5), (product.pk, 7)]
        assert stock.insufficient_products(lines) == {product.pk}

    def test_expiring_stock_does_not_count(self, product, make_batch, in_weeks):
        """Stock inside the look-ahead window is ignored."""
        make_batch(product, 100, in_weeks(1))

        assert stock.insufficient_products([(product.pk, 1)]) == {product.pk}

    def test_idempotent(self, product, other_product, make_batch, in_weeks):
        """Two calls with unchanged stock give the same answer."""
        make_batch(product, 3, in_weeks(10))
        lines = [{'productId': product.pk, 'quantity': 4},
                 {'productId': other_product.pk, 'quantity': 1}]

        first = stock.insufficient_products(lines)
        second = stock.insufficient_products(lines)

        assert first == second == {product.pk, other_product.pk}

    def test_explicit_cutoff(self, product, make_batch, in_weeks):
        """not_expiring_before overrides the clock."""
        make_batch(product, 10, in_weeks(2))

        assert stock.insufficient_products([(product.pk, 10)]) == {product.pk}
        assert stock.insufficient_products(
            [(product.pk, 10)], not_expiring_before=in_weeks(1)
        ) == set()

    def test_unknown_product(self, db):
        with pytest.raises(NotFoundError) as exc:
            stock.insufficient_products([(424242, 1)])

        assert exc.value.code == 'PRODUCT_NOT_FOUND'
        assert '424242' in exc.value.message

    def test_invalid_quantity(self, product):
        """Lines with quantity <= 0 are rejected."""
        with pytest.raises(StockError) as exc:
            stock.insufficient_products([(product.pk, 0)])

        assert exc.value.code == 'INVALID_QUANTITY'


class TestValidate:
    """Tests for stock.validate()."""

    def test_passes(self, product, make_batch, in_weeks):
        make_batch(product, 10, in_weeks(10))

        assert stock.validate([(product.pk, 10)]) is None

    def test_message_lists_ids(self, product, other_product):
        """Message names every failing id, comma-joined and sorted."""
        with pytest.raises(StockError) as exc:
            stock.validate([(other_product.pk, 1), (product.pk, 1)])

        ids = sorted([product.pk, other_product.pk])
        assert exc.value.code == 'INVALID_ORDER'
        assert exc.value.product_ids == ids
        assert str(exc.value) == (
            f"Pedido de compra inválido. Produtos com ID {ids[0]},{ids[1]} "
            f"em quantidades insuficientes"
        )

    def test_custom_code(self, product):
        """Close-time validation uses INSUFFICIENT_STOCK."""
        with pytest.raises(StockError) as exc:
            stock.validate([(product.pk, 1)], code='INSUFFICIENT_STOCK')

        assert exc.value.code == 'INSUFFICIENT_STOCK'
        assert exc.value.message.startswith('Estoque insuficiente. Produtos com ID')

    def test_as_dict(self, product):
        """as_dict() exposes code, message and data."""
        with pytest.raises(StockError) as exc:
            stock.validate([(product.pk, 1)])

        payload = exc.value.as_dict()
        assert payload['code'] == 'INVALID_ORDER'
        assert payload['data'] == {'product_ids': [product.pk]}

    def test_rejections_are_client_errors(self, product):
        """Order and lookup failures are flagged as client errors."""
        with pytest.raises(StockError) as stock_exc:
            stock.validate([(product.pk, 1)])
        with pytest.raises(NotFoundError) as lookup_exc:
            stock.get_order(999999)

        assert stock_exc.value.is_client_error
        assert lookup_exc.value.is_client_error
