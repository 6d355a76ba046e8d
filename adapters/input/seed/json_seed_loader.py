import json
import logging
import os
from typing import List, Tuple

from adapters.input.seed.records import as_record, build_hotel, build_room
from app.domain.entities.hotel import Hotel
from app.domain.entities.room import Room
from app.domain.errors import SeedDataError
from app.domain.services.catalog_service import Catalog
from app.ports.input.seed_loader_port import SeedLoaderPort

logger = logging.getLogger(__name__)


class JsonSeedLoader(SeedLoaderPort):
    """
    Lee el catálogo desde un fichero JSON:

        {"hotels": [{"name": ..., "phone": ..., "stars": 4, "city": ...,
                     "description": ..., "rooms": [{"type": ..., "price": 100,
                     "available": 3, "description": ...}]}]}
    """

    def __init__(self, file_path: str):
        self.file_path = file_path

    def load(self, catalog: Catalog) -> int:
        if not os.path.exists(self.file_path):
            raise FileNotFoundError(f"Fichero semilla no encontrado: {self.file_path}")

        with open(self.file_path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise SeedDataError(f"JSON inválido en {self.file_path}: {e}") from e

        hotels = data.get("hotels") if isinstance(data, dict) else None
        if not isinstance(hotels, list):
            raise SeedDataError(f"{self.file_path} debe contener una lista 'hotels'")

        # Se construye todo antes de registrar: un fichero inválido no carga nada
        parsed: List[Tuple[Hotel, List[Room]]] = []
        for record in hotels:
            record = as_record(record, "hotel")
            hotel = build_hotel(record)

            room_records = record.get("rooms") or []
            if not isinstance(room_records, list):
                raise SeedDataError(f"'rooms' debe ser una lista en {record!r}")

            parsed.append((hotel, [build_room(hotel, as_record(r, "room")) for r in room_records]))

        room_count = 0
        for hotel, rooms in parsed:
            catalog.add_hotel(hotel)
            for room in rooms:
                catalog.add_room(room)
                room_count += 1

        logger.info(f"✓ Leído: {self.file_path} ({len(hotels)} hoteles, {room_count} habitaciones)")
        return room_count
