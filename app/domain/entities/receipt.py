from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from app.domain.entities.room import Room
from app.domain.entities.user import User


@dataclass
class ReceiptLine:
    """
    Una habitación del carrito con sus fechas y su precio calculado.
    """
    room: Room
    check_in: date
    check_out: date
    price: int

    @property
    def hotel_name(self) -> str:
        return self.room.hotel.name

    @property
    def city(self) -> str:
        return self.room.hotel.city


@dataclass
class Receipt:
    """
    Resumen derivado del carrito (pantalla de carrito y fichero de confirmación).
    No se guarda en memoria más allá de la operación que lo construye.
    """
    booking_date: date
    user: Optional[User] = None
    lines: List[ReceiptLine] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Suma de los precios por línea (nunca recalculado por separado)"""
        return sum(line.price for line in self.lines)

    def is_empty(self) -> bool:
        return not self.lines


@dataclass
class CheckoutResult:
    """Resultado de un pago completado"""
    location: str
    receipt: Receipt

    @property
    def total(self) -> int:
        return self.receipt.total
