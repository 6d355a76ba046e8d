import random
import re
from datetime import date
from unittest.mock import MagicMock

import pytest

from adapters.output.receipts.text_file_receipt_adapter import TextFileReceiptAdapter
from app.domain.entities.room import Room
from app.domain.errors import ReceiptWriteError
from app.domain.services.pricing import calculate_stay_price
from app.domain.services.receipt_writer import ReceiptWriter
from app.ports.output.receipt_port import ReceiptPort

CHECK_IN = date(2024, 1, 1)
CHECK_OUT = date(2024, 1, 4)


class TestGenerateFileName:
    def test_uses_nickname(self, receipt_writer, user):
        name = receipt_writer.generate_file_name(user)
        assert re.fullmatch(r"20240101_jane\.doe_\d{5}\.txt", name)

    def test_without_user(self, receipt_writer):
        assert re.fullmatch(r"20240101_user_\d{5}\.txt", receipt_writer.generate_file_name())

    def test_random_id_range(self, receipt_port):
        writer = ReceiptWriter(receipt_port, today=lambda: CHECK_IN, rng=random.Random(0))
        ids = [int(writer.generate_file_name().split("_")[2][:-4]) for _ in range(500)]
        assert all(10000 <= i <= 99999 for i in ids)


class TestRender:
    def test_full_format(self, receipt_writer, room, user):
        user.set_payment_name("Jane", "Doe")
        receipt = receipt_writer.build_receipt([room], user, CHECK_IN, CHECK_OUT)

        expected = (
            "CUSTOMER INFORMATION:\n"
            "===============================\n"
            "Name: Jane Doe\n"
            "Email: jane.doe@example.com\n"
            "\n"
            "BOOKING INFORMATION:\n"
            "===============================\n"
            "Booking Date: 2024-01-01\n"
            "BOOKING DETAILS:\n"
            "===============================\n"
            "\n"
            "Hotel: Test Hotel\n"
            "City: Springfield\n"
            "Room Type: Standard\n"
            "Description: Queen bed\n"
            "Check-in Date: 2024-01-01\n"
            "Check-out Date: 2024-01-04\n"
            "Price: $300.00\n"
            "\n"
            "===============================\n"
            "TOTAL PRICE: $300.00\n"
        )
        assert receipt_writer.render(receipt) == expected

    def test_name_line_omitted_until_captured(self, receipt_writer, room, user):
        text = receipt_writer.render(receipt_writer.build_receipt([room], user, CHECK_IN, CHECK_OUT))

        assert "Name:" not in text
        assert "Email: jane.doe@example.com\n" in text

    def test_customer_block_omitted_without_user(self, receipt_writer, room):
        text = receipt_writer.render(receipt_writer.build_receipt([room], None, CHECK_IN, CHECK_OUT))

        assert text.startswith("BOOKING INFORMATION:\n")

    def test_total_is_sum_of_lines(self, receipt_writer, room, hotel):
        suite = Room(hotel, "Suite", 333, 1, "Big")
        receipt = receipt_writer.build_receipt([room, suite, room], None, CHECK_IN, CHECK_OUT)
        text = receipt_writer.render(receipt)

        line_prices = [float(p) for p in re.findall(r"^Price: \$(\d+\.\d{2})$", text, re.M)]
        total = float(re.search(r"^TOTAL PRICE: \$(\d+\.\d{2})$", text, re.M).group(1))

        assert total == sum(line_prices)
        assert receipt.total == sum(calculate_stay_price(r.price_per_night, CHECK_IN, CHECK_OUT)
                                    for r in (room, suite, room))


class TestStaggeredDates:
    def test_dates_vary_per_position(self, receipt_port, hotel):
        rooms = [Room(hotel, "Standard", 100, 1) for _ in range(3)]
        writer = ReceiptWriter(receipt_port, stagger_room_dates=True, today=lambda: CHECK_IN)
        receipt = writer.build_receipt(rooms, None, CHECK_IN, CHECK_OUT)

        assert [(l.check_in.day, l.check_out.day) for l in receipt.lines] == [(1, 4), (2, 5), (1, 6)]
        assert [l.price for l in receipt.lines] == [300, 300, 500]
        assert receipt.total == 1100

    def test_repeated_room_takes_its_last_position(self, receipt_port, room, hotel):
        suite = Room(hotel, "Suite", 200, 1)
        writer = ReceiptWriter(receipt_port, stagger_room_dates=True, today=lambda: CHECK_IN)
        receipt = writer.build_receipt([room, suite, room], None, CHECK_IN, CHECK_OUT)

        assert [(l.check_in.day, l.check_out.day) for l in receipt.lines] == [(1, 6), (2, 5), (1, 6)]
        assert [l.price for l in receipt.lines] == [500, 600, 500]
        assert receipt.total == 1600

    def test_uniform_dates_by_default(self, receipt_writer, room):
        receipt = receipt_writer.build_receipt([room, room], None, CHECK_IN, CHECK_OUT)
        assert {(l.check_in, l.check_out) for l in receipt.lines} == {(CHECK_IN, CHECK_OUT)}


class TestWriteReceipt:
    def test_writes_through_port(self, receipt_writer, receipt_port, room, user):
        location = receipt_writer.write_receipt([room], user, CHECK_IN, CHECK_OUT)

        content = receipt_port.read_receipt(location)
        assert content.endswith("TOTAL PRICE: $300.00\n")

    def test_port_failure_is_reported(self, room):
        port = MagicMock(spec=ReceiptPort)
        port.save_receipt.side_effect = ReceiptWriteError("disk full")
        writer = ReceiptWriter(port, today=lambda: CHECK_IN)

        with pytest.raises(ReceiptWriteError):
            writer.write_receipt([room], None, CHECK_IN, CHECK_OUT)


class TestTextFileReceiptAdapter:
    def test_writes_utf8_file(self, tmp_path):
        adapter = TextFileReceiptAdapter(output_dir=str(tmp_path))

        location = adapter.save_receipt("20240101_user_12345.txt", "Hotel: Café Ñandú\n")

        assert (tmp_path / "20240101_user_12345.txt").read_bytes() == "Hotel: Café Ñandú\n".encode("utf-8")
        assert adapter.read_receipt(location) == "Hotel: Café Ñandú\n"

    def test_creates_missing_directory(self, tmp_path):
        adapter = TextFileReceiptAdapter(output_dir=str(tmp_path / "receipts" / "2024"))
        adapter.save_receipt("a.txt", "x\n")
        assert (tmp_path / "receipts" / "2024" / "a.txt").exists()

    def test_unwritable_target_raises(self, tmp_path):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("")
        adapter = TextFileReceiptAdapter(output_dir=str(blocker))

        with pytest.raises(ReceiptWriteError):
            adapter.save_receipt("a.txt", "x\n")

    def test_read_missing_returns_none(self, tmp_path):
        assert TextFileReceiptAdapter(str(tmp_path)).read_receipt(str(tmp_path / "nope.txt")) is None
