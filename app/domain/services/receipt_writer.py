import logging
import random
from datetime import date, timedelta
from typing import Callable, List, Optional

from app.domain.entities.receipt import Receipt, ReceiptLine
from app.domain.entities.room import Room
from app.domain.entities.user import User
from app.domain.services.pricing import calculate_stay_price
from app.ports.output.receipt_port import ReceiptPort

logger = logging.getLogger(__name__)

SEPARATOR = "==============================="


class ReceiptWriter:
    """
    Construye, renderiza y guarda el fichero de confirmación de una reserva.

    El formato de texto es fijo (ver render); el destino lo decide el
    ReceiptPort inyectado.
    """

    def __init__(self,
                 receipt_port: ReceiptPort,
                 stagger_room_dates: bool = False,
                 today: Callable[[], date] = date.today,
                 rng: Optional[random.Random] = None):
        """
        Constructor.

        Args:
            receipt_port: Almacenamiento de recibos
            stagger_room_dates: Desplaza las fechas de cada habitación según
                su última posición en el carrito (entrada +index%2, salida
                +index%3 días); las repetidas comparten fechas
            today: Reloj inyectable (fecha de reserva y nombre de fichero)
            rng: Generador aleatorio para el id de 5 dígitos
        """
        self.receipt_port = receipt_port
        self.stagger_room_dates = stagger_room_dates
        self.today = today
        self.rng = rng or random.Random()

    def generate_file_name(self, user: Optional[User] = None) -> str:
        """{yyyyMMdd}_{nickname|user}_{10000-99999}.txt (sin comprobar colisiones)"""
        date_str = self.today().strftime("%Y%m%d")
        random_id = self.rng.randint(10000, 99999)
        user_name = user.nickname if user is not None else "user"
        return f"{date_str}_{user_name}_{random_id}.txt"

    def build_receipt(self,
                      rooms: List[Room],
                      user: Optional[User],
                      check_in: date,
                      check_out: date) -> Receipt:
        """
        Calcula una línea por habitación del carrito.
        El total del recibo es siempre la suma de estas líneas.
        """
        receipt = Receipt(booking_date=self.today(), user=user)
        # Cada habitación usa la última posición que ocupa en el carrito
        last_index = {room.room_id: index for index, room in enumerate(rooms)}

        for room in rooms:
            room_check_in, room_check_out = self._dates_for(last_index[room.room_id], check_in, check_out)
            price = calculate_stay_price(room.price_per_night, room_check_in, room_check_out)
            receipt.lines.append(ReceiptLine(
                room=room,
                check_in=room_check_in,
                check_out=room_check_out,
                price=price
            ))

        return receipt

    def render(self, receipt: Receipt) -> str:
        """Texto plano del recibo"""
        out: List[str] = []

        if receipt.user is not None:
            out.append("CUSTOMER INFORMATION:\n")
            out.append(f"{SEPARATOR}\n")
            full_name = receipt.user.get_full_name()
            if full_name is not None:
                out.append(f"Name: {full_name}\n")
            out.append(f"Email: {receipt.user.email}\n\n")

        out.append("BOOKING INFORMATION:\n")
        out.append(f"{SEPARATOR}\n")
        out.append(f"Booking Date: {receipt.booking_date.isoformat()}\n")

        out.append("BOOKING DETAILS:\n")
        out.append(f"{SEPARATOR}\n\n")

        for line in receipt.lines:
            out.append(f"Hotel: {line.hotel_name}\n")
            out.append(f"City: {line.city}\n")
            out.append(f"Room Type: {line.room.room_type}\n")
            out.append(f"Description: {line.room.description}\n")
            out.append(f"Check-in Date: {line.check_in.isoformat()}\n")
            out.append(f"Check-out Date: {line.check_out.isoformat()}\n")
            out.append(f"Price: ${format_price(line.price)}\n\n")

        out.append(f"{SEPARATOR}\n")
        out.append(f"TOTAL PRICE: ${format_price(receipt.total)}\n")

        return "".join(out)

    def write_receipt(self,
                      rooms: List[Room],
                      user: Optional[User],
                      check_in: date,
                      check_out: date) -> str:
        """
        Construye, renderiza y guarda el recibo.

        Returns:
            Ubicación devuelta por el ReceiptPort

        Raises:
            ReceiptWriteError: Si el almacenamiento falla
        """
        receipt = self.build_receipt(rooms, user, check_in, check_out)
        return self.save(receipt)

    def save(self, receipt: Receipt) -> str:
        """Renderiza y guarda un recibo ya construido"""
        file_name = self.generate_file_name(receipt.user)
        location = self.receipt_port.save_receipt(file_name, self.render(receipt))
        logger.info(f"🧾 Recibo {file_name}: {len(receipt.lines)} habitaciones, total ${format_price(receipt.total)}")
        return location

    def _dates_for(self, index: int, check_in: date, check_out: date):
        if not self.stagger_room_dates:
            return check_in, check_out
        # Variación de demo heredada: 0/1 días la entrada, 0/1/2 la salida
        return check_in + timedelta(days=index % 2), check_out + timedelta(days=index % 3)


def format_price(amount: int) -> str:
    """Importe con dos decimales (100 -> '100.00')"""
    return f"{amount:.2f}"
