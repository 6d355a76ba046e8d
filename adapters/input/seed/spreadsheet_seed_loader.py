import logging
import os
from typing import Dict, List, Tuple

import pandas as pd

from adapters.input.seed.records import build_hotel, build_room
from app.domain.entities.hotel import Hotel
from app.domain.entities.room import Room
from app.domain.errors import SeedDataError
from app.domain.services.catalog_service import Catalog
from app.ports.input.seed_loader_port import SeedLoaderPort

logger = logging.getLogger(__name__)

HOTEL_COLUMNS = {
    "hotel_name": "name",
    "hotel_phone": "phone",
    "hotel_stars": "stars",
    "hotel_city": "city",
    "hotel_description": "description",
}

ROOM_COLUMNS = {
    "room_type": "type",
    "room_price": "price",
    "room_available": "available",
    "room_description": "description",
}


class SpreadsheetSeedLoader(SeedLoaderPort):
    """
    Lee el catálogo desde una tabla plana (.csv, .xlsx, .xls).
    Una fila por habitación; las columnas hotel_* se repiten y los hoteles
    se agrupan por (nombre, ciudad).
    """

    def __init__(self, file_path: str):
        self.file_path = file_path

    def load(self, catalog: Catalog) -> int:
        df = self._read_table()

        missing = [c for c in list(HOTEL_COLUMNS) + list(ROOM_COLUMNS)
                   if c not in df.columns and not c.endswith(("_description", "_phone"))]
        if missing:
            raise SeedDataError(f"Faltan columnas en {self.file_path}: {', '.join(missing)}")

        hotels: Dict[Tuple[str, str], Hotel] = {}
        rooms: List[Room] = []

        for row in df.to_dict(orient="records"):
            hotel_record = {field: row.get(column, "") for column, field in HOTEL_COLUMNS.items()}
            room_record = {field: row.get(column, "") for column, field in ROOM_COLUMNS.items()}

            key = (str(hotel_record["name"]).strip(), str(hotel_record["city"]).strip().casefold())
            hotel = hotels.get(key)
            if hotel is None:
                hotel = build_hotel(hotel_record)
                hotels[key] = hotel

            rooms.append(build_room(hotel, room_record))

        # Solo se registra cuando todas las filas son válidas
        for hotel in hotels.values():
            catalog.add_hotel(hotel)
        for room in rooms:
            catalog.add_room(room)

        logger.info(f"✓ Leído: {self.file_path} ({len(hotels)} hoteles, {len(rooms)} habitaciones)")
        return len(rooms)

    def _read_table(self) -> pd.DataFrame:
        if not os.path.exists(self.file_path):
            raise FileNotFoundError(f"Fichero semilla no encontrado: {self.file_path}")

        if self.file_path.endswith(".csv"):
            df = pd.read_csv(self.file_path, dtype=str, keep_default_na=False)
        elif self.file_path.endswith(".xlsx") or self.file_path.endswith(".xls"):
            df = pd.read_excel(self.file_path, dtype=str).fillna("")
        else:
            raise SeedDataError(f"Formato no soportado: {self.file_path}")

        df.columns = [str(c).strip().lower() for c in df.columns]
        return df
