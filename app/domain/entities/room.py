import uuid
from dataclasses import dataclass, field

from app.domain.entities.hotel import Hotel


@dataclass(eq=False)
class Room:
    """
    Tipo de habitación ofertado por un hotel.

    La identidad es por instancia (eq=False): dos habitaciones con los mismos
    datos siguen siendo dos entradas distintas del catálogo. Para claves
    estables (mapa de cantidades del carrito) se usa room_id.
    """
    hotel: Hotel
    room_type: str
    price_per_night: int
    available: int
    description: str = ""
    room_id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self):
        """Validación"""
        if self.price_per_night < 0:
            raise ValueError(f"price_per_night no puede ser negativo, recibido: {self.price_per_night}")
        if self.available < 0:
            raise ValueError(f"available no puede ser negativo, recibido: {self.available}")

    def is_available(self) -> bool:
        return self.available > 0

    def __repr__(self) -> str:
        return (f"Room(hotel={self.hotel.name!r}, room_type={self.room_type!r}, "
                f"price_per_night={self.price_per_night}, available={self.available})")
