"""
Datos de demostración del catálogo.

Hoteles en 6 ciudades con sus tipos de habitación. Se cargan cuando
SEED_SOURCE=sample (valor por defecto).
"""
import logging

from app.domain.entities.hotel import Hotel
from app.domain.entities.room import Room
from app.domain.services.catalog_service import Catalog
from app.ports.input.seed_loader_port import SeedLoaderPort

logger = logging.getLogger(__name__)


# ==============================================================================
# HOTELES Y HABITACIONES
# (name, phone, stars, city, description) -> [(type, price, available, description)]
# ==============================================================================

SAMPLE_HOTELS = [
    # ==========================================================================
    # NEW YORK
    # ==========================================================================
    (("Grand Hotel", "+1234567890", 5, "New York", "Luxury hotel in downtown"), [
        ("Standard", 150, 5, "Comfortable room with queen bed"),
        ("Deluxe", 250, 3, "Spacious room with king bed and city view"),
        ("Suite", 400, 2, "Luxury suite with separate living area"),
    ]),
    (("Comfort Inn", "+0987654321", 3, "New York", "Affordable comfort"), [
        ("Standard", 80, 8, "Basic room with double bed"),
        ("Double", 120, 5, "Room with two double beds"),
    ]),
    (("Plaza Hotel", "+2223334444", 5, "New York", "Historic luxury hotel"), [
        ("Classic", 200, 10, "Elegant room with queen bed"),
        ("Executive", 350, 5, "Luxury room with king bed and park view"),
        ("Presidential Suite", 800, 1, "Opulent suite with butler service"),
    ]),
    (("Broadway Motel", "+5556667777", 2, "New York", "Budget-friendly near theaters"), [
        ("Basic", 60, 12, "Simple room with double bed"),
        ("Family", 90, 6, "Room with two queen beds"),
    ]),

    # ==========================================================================
    # MIAMI
    # ==========================================================================
    (("Beach Resort", "+1122334455", 4, "Miami", "Beautiful beachfront property"), [
        ("Ocean View", 180, 8, "Room with balcony and ocean view"),
        ("Pool View", 150, 10, "Room overlooking the pool area"),
        ("Beach Suite", 300, 4, "Suite with direct beach access"),
    ]),
    (("Ocean View", "+9988776655", 5, "Miami", "Luxury oceanfront resort"), [
        ("Deluxe Ocean", 250, 15, "Deluxe room with panoramic ocean view"),
        ("Premium Suite", 450, 5, "Premium suite with private balcony"),
    ]),
    (("Palm Suites", "+1231231234", 3, "Miami", "Family-friendly hotel with pool"), [
        ("Standard", 100, 20, "Comfortable room for families"),
        ("Cabana", 150, 8, "Room with direct pool access"),
    ]),

    # ==========================================================================
    # DENVER
    # ==========================================================================
    (("Mountain Lodge", "+5566778899", 3, "Denver", "Scenic mountain views"), [
        ("Mountain View", 120, 10, "Room with scenic mountain views"),
    ]),
    (("Alpine Resort", "+4445556666", 4, "Denver", "Ski-in/ski-out luxury resort"), [
        ("Ski Suite", 220, 5, "Suite with ski-in/ski-out access"),
    ]),

    # ==========================================================================
    # LOS ANGELES
    # ==========================================================================
    (("Hollywood Star", "+7778889999", 4, "Los Angeles", "Close to Hollywood attractions"), [
        ("Celebrity Suite", 300, 3, "Suite with Hollywood memorabilia"),
    ]),
    (("Beverly Hills Hotel", "+3334445555", 5, "Los Angeles", "Exclusive luxury experience"), [
        ("Luxury Room", 400, 8, "Opulent room with premium amenities"),
    ]),
    (("Sunset Motel", "+6667778888", 2, "Los Angeles", "Affordable option on Sunset Blvd"), [
        ("Standard", 70, 15, "Basic clean room for budget travelers"),
    ]),

    # ==========================================================================
    # CHICAGO
    # ==========================================================================
    (("Windy City Inn", "+8889990000", 3, "Chicago", "Comfortable downtown hotel"), [
        ("City View", 110, 12, "Room with Chicago skyline view"),
    ]),
    (("Lakeside Hotel", "+1112223333", 4, "Chicago", "Beautiful views of Lake Michigan"), [
        ("Lake View", 160, 8, "Room with beautiful lake views"),
    ]),

    # ==========================================================================
    # BOSTON
    # ==========================================================================
    (("Historic Inn", "+4443332222", 4, "Boston", "Charming hotel in historic district"), [
        ("Historic Suite", 180, 5, "Suite in the historic wing"),
    ]),
    (("University Lodge", "+7776665555", 3, "Boston", "Convenient for campus visits"), [
        ("Scholar Room", 90, 20, "Comfortable room near campus"),
    ]),
]


class SampleSeedLoader(SeedLoaderPort):
    """Carga SAMPLE_HOTELS en el catálogo"""

    def load(self, catalog: Catalog) -> int:
        room_count = 0

        for hotel_fields, rooms in SAMPLE_HOTELS:
            hotel = Hotel(*hotel_fields)
            catalog.add_hotel(hotel)

            for room_type, price, available, description in rooms:
                catalog.add_room(Room(hotel, room_type, price, available, description))
                room_count += 1

        logger.info(f"✓ {len(SAMPLE_HOTELS)} hoteles de ejemplo cargados ({room_count} habitaciones)")
        return room_count
