from typing import Any, Dict

from app.domain.entities.hotel import Hotel
from app.domain.entities.room import Room
from app.domain.errors import SeedDataError


def to_int(value: Any, field_name: str) -> int:
    """Convierte '5', 5 o 5.0 a int; cualquier otra cosa es SeedDataError"""
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise SeedDataError(f"'{field_name}' debe ser un entero, recibido: {value!r}")

    if not number.is_integer():
        raise SeedDataError(f"'{field_name}' debe ser un entero, recibido: {value!r}")
    return int(number)


def as_record(value: Any, kind: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise SeedDataError(f"Cada {kind} debe ser un objeto, recibido: {value!r}")
    return value


def require(record: Dict[str, Any], key: str) -> Any:
    if key not in record or record[key] is None or str(record[key]).strip() == "":
        raise SeedDataError(f"Falta el campo '{key}' en {record!r}")
    return record[key]


def build_hotel(record: Dict[str, Any]) -> Hotel:
    """Hotel desde un dict {name, phone, stars, city, description}"""
    try:
        return Hotel(
            name=str(require(record, "name")).strip(),
            phone=str(record.get("phone", "")).strip(),
            stars=to_int(require(record, "stars"), "stars"),
            city=str(require(record, "city")).strip(),
            description=str(record.get("description", "")).strip()
        )
    except ValueError as e:
        raise SeedDataError(str(e)) from e


def build_room(hotel: Hotel, record: Dict[str, Any]) -> Room:
    """Room desde un dict {type, price, available, description}"""
    try:
        return Room(
            hotel=hotel,
            room_type=str(require(record, "type")).strip(),
            price_per_night=to_int(require(record, "price"), "price"),
            available=to_int(require(record, "available"), "available"),
            description=str(record.get("description", "")).strip()
        )
    except ValueError as e:
        raise SeedDataError(str(e)) from e
