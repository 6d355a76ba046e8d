import logging
from typing import List, Optional

from app.domain.entities.hotel import Hotel
from app.domain.entities.room import Room

logger = logging.getLogger(__name__)


class Catalog:
    """
    Registro en memoria de hoteles y habitaciones.

    Se construye explícitamente y se inyecta a quien lo necesite (ver
    DIContainer); no hay estado global. Solo admite altas (append-only)
    y consultas que no mutan nada.
    """

    def __init__(self):
        self._hotels: List[Hotel] = []
        self._rooms: List[Room] = []

    def add_hotel(self, hotel: Hotel) -> None:
        """Registra un hotel (sin de-duplicar)"""
        if hotel is None:
            raise ValueError("hotel no puede ser None")
        self._hotels.append(hotel)

    def add_room(self, room: Room) -> None:
        """Registra una habitación (sin de-duplicar)"""
        if room is None:
            raise ValueError("room no puede ser None")
        self._rooms.append(room)

    def find_hotels_by_city(self, city: str) -> List[Hotel]:
        """
        Busca hoteles por ciudad.

        Args:
            city: Nombre de la ciudad (comparación exacta sin distinguir mayúsculas)

        Returns:
            Hoteles en orden de alta; lista vacía si no hay coincidencias
        """
        wanted = city.casefold()
        found = [hotel for hotel in self._hotels if hotel.city.casefold() == wanted]
        logger.debug(f"🔍 Búsqueda: '{city}' -> {len(found)} hoteles")
        return found

    def find_rooms_by_hotel(self, hotel: Hotel) -> List[Room]:
        """Habitaciones de un hotel, en orden de alta"""
        return [room for room in self._rooms if room.hotel == hotel]

    def find_room(self, room_id: str) -> Optional[Room]:
        """Habitación por su identificador estable"""
        for room in self._rooms:
            if room.room_id == room_id:
                return room
        return None

    def cities(self) -> List[str]:
        """Ciudades distintas, en orden de alta"""
        seen = []
        for hotel in self._hotels:
            if hotel.city not in seen:
                seen.append(hotel.city)
        return seen

    @property
    def hotels(self) -> List[Hotel]:
        return list(self._hotels)

    @property
    def rooms(self) -> List[Room]:
        return list(self._rooms)

    def is_empty(self) -> bool:
        return not self._hotels
