import json

import pandas as pd
import pytest

from adapters.input.seed.json_seed_loader import JsonSeedLoader
from adapters.input.seed.sample_seed_loader import SAMPLE_HOTELS, SampleSeedLoader
from adapters.input.seed.spreadsheet_seed_loader import SpreadsheetSeedLoader
from app.domain.errors import SeedDataError
from app.domain.services.catalog_service import Catalog


class TestSampleSeedLoader:
    def test_loads_all_sample_data(self):
        catalog = Catalog()

        rooms = SampleSeedLoader().load(catalog)

        assert len(catalog.hotels) == len(SAMPLE_HOTELS)
        assert rooms == sum(len(r) for _, r in SAMPLE_HOTELS) == len(catalog.rooms)
        assert [h.name for h in catalog.find_hotels_by_city("miami")] == ["Beach Resort", "Ocean View", "Palm Suites"]

    def test_rooms_point_to_their_hotel(self):
        catalog = Catalog()
        SampleSeedLoader().load(catalog)

        grand = catalog.find_hotels_by_city("New York")[0]
        assert [r.room_type for r in catalog.find_rooms_by_hotel(grand)] == ["Standard", "Deluxe", "Suite"]


class TestJsonSeedLoader:
    def write(self, tmp_path, data):
        path = tmp_path / "seed.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    def test_loads_hotels_and_rooms(self, tmp_path):
        path = self.write(tmp_path, {"hotels": [{
            "name": "Test Hotel", "phone": "+1", "stars": 3, "city": "Springfield",
            "description": "desc",
            "rooms": [{"type": "Standard", "price": 100, "available": 2, "description": "Queen"}]
        }]})
        catalog = Catalog()

        assert JsonSeedLoader(path).load(catalog) == 1
        hotel = catalog.find_hotels_by_city("springfield")[0]
        room = catalog.find_rooms_by_hotel(hotel)[0]
        assert (room.price_per_night, room.available) == (100, 2)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            JsonSeedLoader(str(tmp_path / "missing.json")).load(Catalog())

    def test_missing_field(self, tmp_path):
        path = self.write(tmp_path, {"hotels": [{"name": "X", "stars": 3}]})
        with pytest.raises(SeedDataError):
            JsonSeedLoader(path).load(Catalog())

    def test_bad_stars(self, tmp_path):
        path = self.write(tmp_path, {"hotels": [{"name": "X", "stars": 9, "city": "Y"}]})
        with pytest.raises(SeedDataError):
            JsonSeedLoader(path).load(Catalog())

    def test_not_a_hotel_list(self, tmp_path):
        with pytest.raises(SeedDataError):
            JsonSeedLoader(self.write(tmp_path, [1, 2])).load(Catalog())

    @pytest.mark.parametrize("hotels", [
        [{"name": "H", "stars": 3, "city": "X", "rooms": None}],
        [{"name": "H", "stars": 3, "city": "X", "rooms": {"type": "Std"}}],
        [{"name": "H", "stars": 3, "city": "X", "rooms": [7]}],
        [42],
        ["Grand Hotel"],
    ])
    def test_malformed_records(self, tmp_path, hotels):
        catalog = Catalog()
        with pytest.raises(SeedDataError):
            JsonSeedLoader(self.write(tmp_path, {"hotels": hotels})).load(catalog)
        assert catalog.is_empty()

    def test_invalid_file_loads_nothing(self, tmp_path):
        path = self.write(tmp_path, {"hotels": [
            {"name": "Good", "stars": 3, "city": "X",
             "rooms": [{"type": "Std", "price": 100, "available": 1}]},
            {"name": "Bad", "stars": 9, "city": "X"},
        ]})
        catalog = Catalog()

        with pytest.raises(SeedDataError):
            JsonSeedLoader(path).load(catalog)

        assert catalog.is_empty()
        assert catalog.rooms == []


class TestSpreadsheetSeedLoader:
    HEADER = "hotel_name,hotel_phone,hotel_stars,hotel_city,hotel_description,room_type,room_price,room_available,room_description\n"

    def test_groups_rows_by_hotel(self, tmp_path):
        path = tmp_path / "seed.csv"
        path.write_text(
            self.HEADER
            + "Lakeside Hotel,+1,4,Chicago,Lake views,Lake View,160,8,Lake room\n"
            + "Lakeside Hotel,+1,4,Chicago,Lake views,Suite,300,2,Big\n"
            + "Windy City Inn,+2,3,Chicago,Downtown,City View,110,12,Skyline\n",
            encoding="utf-8"
        )
        catalog = Catalog()

        assert SpreadsheetSeedLoader(str(path)).load(catalog) == 3
        hotels = catalog.find_hotels_by_city("CHICAGO")
        assert [h.name for h in hotels] == ["Lakeside Hotel", "Windy City Inn"]
        assert [r.room_type for r in catalog.find_rooms_by_hotel(hotels[0])] == ["Lake View", "Suite"]

    def test_missing_columns(self, tmp_path):
        path = tmp_path / "seed.csv"
        path.write_text("hotel_name,hotel_city\nA,B\n", encoding="utf-8")
        with pytest.raises(SeedDataError):
            SpreadsheetSeedLoader(str(path)).load(Catalog())

    def test_non_integer_price(self, tmp_path):
        path = tmp_path / "seed.csv"
        path.write_text(self.HEADER + "A,+1,3,B,,Std,cheap,1,\n", encoding="utf-8")
        with pytest.raises(SeedDataError):
            SpreadsheetSeedLoader(str(path)).load(Catalog())

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "seed.txt"
        path.write_text("x", encoding="utf-8")
        with pytest.raises(SeedDataError):
            SpreadsheetSeedLoader(str(path)).load(Catalog())

    def test_invalid_row_loads_nothing(self, tmp_path):
        path = tmp_path / "seed.csv"
        path.write_text(
            self.HEADER
            + "Lakeside Hotel,+1,4,Chicago,,Lake View,160,8,\n"
            + "Broken Inn,+2,9,Chicago,,Std,100,1,\n",
            encoding="utf-8"
        )
        catalog = Catalog()

        with pytest.raises(SeedDataError):
            SpreadsheetSeedLoader(str(path)).load(catalog)

        assert catalog.is_empty()

    def test_reads_excel(self, tmp_path):
        pytest.importorskip("openpyxl")
        path = tmp_path / "seed.xlsx"
        pd.DataFrame([
            {"hotel_name": "Harbor Hotel", "hotel_phone": "+1", "hotel_stars": 4, "hotel_city": "Seattle",
             "hotel_description": None, "room_type": "Harbor View", "room_price": 210,
             "room_available": 3, "room_description": "Water views"},
            {"hotel_name": "Harbor Hotel", "hotel_phone": "+1", "hotel_stars": 4, "hotel_city": "Seattle",
             "hotel_description": None, "room_type": "Standard", "room_price": 140,
             "room_available": 6, "room_description": None},
        ]).to_excel(path, index=False)
        catalog = Catalog()

        assert SpreadsheetSeedLoader(str(path)).load(catalog) == 2
        hotel = catalog.find_hotels_by_city("seattle")[0]
        assert (hotel.name, hotel.stars, hotel.description) == ("Harbor Hotel", 4, "")
        rooms = catalog.find_rooms_by_hotel(hotel)
        assert [(r.room_type, r.price_per_night, r.available) for r in rooms] == [
            ("Harbor View", 210, 3), ("Standard", 140, 6)]
        assert rooms[1].description == ""
