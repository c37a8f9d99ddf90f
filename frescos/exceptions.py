"""
Exceptions for Frescos.

All errors carry a structured code for programmatic handling:
- NotFoundError: a referenced entity does not exist
- StockError: a stock or order rule rejected the operation

Both are client errors; none is retried automatically.
"""

from decimal import Decimal
from typing import Any


class BaseError(Exception):
    """
    Base for structured errors.

    Attributes:
        code: Error code for programmatic handling
        message: Human-readable message
        data: Additional context data
    """

    _default_messages: dict[str, str] = {}

    is_client_error = True

    def __init__(self, code: str, message: str | None = None, **data: Any):
        self.code = code
        self.data = data
        self.message = message or self._default_message(code, data)
        super().__init__(self.message)

    def _default_message(self, code: str, data: dict[str, Any]) -> str:
        return self._default_messages.get(code, code)

    def as_dict(self) -> dict[str, Any]:
        """Serialize to dict (useful for APIs)."""
        return {
            'code': self.code,
            'message': self.message,
            'data': {
                k: str(v) if isinstance(v, Decimal) else v
                for k, v in self.data.items()
            }
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code!r}, {self.message!r})"


class NotFoundError(BaseError):
    """A buyer, product, section, order or batch does not exist."""

    _default_messages = {
        'BUYER_NOT_FOUND': 'Comprador não encontrado',
        'PRODUCT_NOT_FOUND': 'Produto não encontrado',
        'SECTION_NOT_FOUND': 'Setor não encontrado',
        'ORDER_NOT_FOUND': 'Pedido de compra não encontrado',
        'BATCH_NOT_FOUND': 'Lote não encontrado',
        'REPRESENTATIVE_NOT_FOUND': 'Representante não encontrado',
    }

    def _default_message(self, code, data):
        message = super()._default_message(code, data)
        if 'id' in data:
            return f"{message}: ID {data['id']}"
        return message


class StockError(BaseError):
    """
    Structured exception for stock and order operations.

    Usage:
        try:
            stock.close(order_id)
        except StockError as e:
            if e.code == 'INSUFFICIENT_STOCK':
                print(f"Sem estoque para os produtos {e.product_ids}")
    """

    _default_messages = {
        'INVALID_ORDER': 'Pedido de compra inválido',
        'INSUFFICIENT_STOCK': 'Estoque insuficiente',
        'CAPACITY_EXCEEDED': 'Volume excede a capacidade livre do setor',
        'CATEGORY_MISMATCH': 'Categoria do produto não permitida no setor',
        'INVALID_QUANTITY': 'Quantidade inválida (deve ser positiva)',
        'INVALID_STATUS': 'Status inválido para esta operação',
        'INVALID_SORT': 'Ordenação inválida',
        'EMPTY_ORDER': 'Pedido de compra sem produtos',
        'INVALID_REQUEST': 'Requisição inválida',
        'REPRESENTATIVE_NOT_PERMITTED': 'Representante não pertence a este armazém',
    }

    def _default_message(self, code, data):
        message = super()._default_message(code, data)
        product_ids = data.get('product_ids')
        if product_ids:
            joined = ','.join(str(pk) for pk in product_ids)
            return f"{message}. Produtos com ID {joined} em quantidades insuficientes"
        return message

    @property
    def product_ids(self) -> list[int]:
        """Shortcut for data['product_ids']."""
        return list(self.data.get('product_ids', []))

    @property
    def available(self):
        """Shortcut for data['available']."""
        return self.data.get('available', 0)

    @property
    def requested(self):
        """Shortcut for data['requested']."""
        return self.data.get('requested', 0)
