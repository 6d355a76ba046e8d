from dataclasses import dataclass
from datetime import date
from typing import Optional

from app.domain.entities.hotel import Hotel
from app.domain.entities.room import Room
from app.domain.entities.user import PaymentDetails


@dataclass
class LoginCommand:
    """Comando para abrir la sesión."""
    email: str
    password: str

@dataclass
class LogoutCommand:
    """Comando para cerrar la sesión (el carrito no se toca)."""
    pass

@dataclass
class SearchHotelsQuery:
    """Query para buscar hoteles por ciudad."""
    city: str

@dataclass
class ListRoomsQuery:
    """Query para listar las habitaciones de un hotel."""
    hotel: Hotel

@dataclass
class AddToCartCommand:
    """Comando para reservar una unidad de una habitación."""
    room: Room

@dataclass
class ViewCartQuery:
    """Query para el resumen del carrito con precios."""
    check_in: date
    check_out: date

@dataclass
class ClearCartCommand:
    """Comando para cancelar el carrito (devuelve el inventario)."""
    pass

@dataclass
class CheckoutCommand:
    """Comando para pagar y generar el fichero de confirmación."""
    check_in: Optional[date]
    check_out: Optional[date]
    payment: PaymentDetails
