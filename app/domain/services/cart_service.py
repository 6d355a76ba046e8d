import logging
from datetime import date
from threading import Lock
from typing import Dict, List

from app.domain.entities.room import Room
from app.domain.services.pricing import calculate_stay_price

logger = logging.getLogger(__name__)


class Cart:
    """
    Carrito de reservas + control de inventario.

    Es el único camino que modifica Room.available:
    - add_to_cart: reserva 1 unidad (available - 1)
    - clear_cart: cancelación, devuelve todo al inventario
    - commit_cart: pago completado, vacía sin devolver

    Las tres operaciones se serializan con un Lock para que nadie vea la
    cantidad del carrito actualizada sin la disponibilidad (o al revés).
    """

    def __init__(self):
        self._items: List[Room] = []
        self._quantities: Dict[str, int] = {}
        self._rooms_by_id: Dict[str, Room] = {}
        self._lock = Lock()

    def add_to_cart(self, room: Room) -> bool:
        """
        Añade una unidad de la habitación al carrito.

        Returns:
            False (sin cambios) si no quedan unidades disponibles
        """
        with self._lock:
            if not room.is_available():
                logger.warning(f"⚠️ Sin disponibilidad: {room.hotel.name} / {room.room_type}")
                return False

            self._items.append(room)
            self._quantities[room.room_id] = self._quantities.get(room.room_id, 0) + 1
            self._rooms_by_id[room.room_id] = room
            room.available -= 1

        logger.info(f"🛒 Añadida: {room.hotel.name} / {room.room_type} (quedan {room.available})")
        return True

    def get_cart(self) -> List[Room]:
        """Habitaciones reservadas en orden de alta (con duplicados)"""
        with self._lock:
            return list(self._items)

    def get_cart_quantity(self, room: Room) -> int:
        return self._quantities.get(room.room_id, 0)

    def clear_cart(self) -> None:
        """Cancela el carrito y restaura la disponibilidad de cada habitación"""
        with self._lock:
            for room_id, quantity in self._quantities.items():
                self._rooms_by_id[room_id].available += quantity
            restored = len(self._items)
            self._reset()

        logger.info(f"↩️ Carrito cancelado ({restored} unidades devueltas al inventario)")

    def commit_cart(self) -> None:
        """Vacía el carrito tras un pago: el inventario queda consumido"""
        with self._lock:
            consumed = len(self._items)
            self._reset()

        logger.info(f"✅ Carrito confirmado ({consumed} unidades consumidas)")

    def calculate_total_price(self, room: Room, check_in: date, check_out: date) -> int:
        """Precio de la estancia para una habitación (ver pricing)"""
        return calculate_stay_price(room.price_per_night, check_in, check_out)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def _reset(self) -> None:
        self._items.clear()
        self._quantities.clear()
        self._rooms_by_id.clear()
