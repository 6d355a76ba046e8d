import asyncio
import sys
import logging
from datetime import date, timedelta
from pathlib import Path
from typing import List, Optional

# Configurar path
sys.path.insert(0, str(Path(__file__).parent))

from dotenv import load_dotenv

from config.settings import Settings
from config.container import DIContainer
from app.domain.commands import (
    LoginCommand,
    LogoutCommand,
    SearchHotelsQuery,
    ListRoomsQuery,
    AddToCartCommand,
    ViewCartQuery,
    ClearCartCommand,
    CheckoutCommand
)
from app.domain.entities.hotel import Hotel
from app.domain.entities.receipt import Receipt
from app.domain.entities.room import Room
from app.domain.entities.user import PaymentDetails
from app.domain.errors import BookingError
from app.domain.services.checkout_service import validate_stay
from app.domain.services.receipt_writer import format_price

logger = logging.getLogger("HotelBooking")

HELP = """
Comandos:
  search <ciudad>   Buscar hoteles
  rooms <n>         Ver habitaciones del hotel n
  add <n>           Añadir la habitación n al carrito
  cart              Ver carrito
  checkout          Pagar y generar confirmación
  cancel            Vaciar carrito (devuelve disponibilidad)
  logout            Cerrar sesión
  quit              Salir
"""


class HotelBookingApp:
    """
    Front-end de consola sobre el Command Bus.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.container = DIContainer(settings)
        self.bus = None
        self.check_in: Optional[date] = None
        self.check_out: Optional[date] = None
        self._hotels: List[Hotel] = []
        self._rooms: List[Room] = []
        self._loop = None

    async def initialize(self) -> None:
        logger.info("⚙️ Inicializando sistema...")
        self._loop = asyncio.get_running_loop()
        self.container.initialize()
        self.bus = self.container.get_command_bus()
        logger.info("✓ Sistema listo")

    async def run_demo_mode(self) -> None:
        """Reserva guionizada de punta a punta"""
        print("\n🎬 MODO DEMO\n" + "=" * 60)

        user = await self.bus.execute_command(LoginCommand("demo.guest@example.com", "demo"))
        print(f"👤 User: {user.nickname}")

        self.check_in = date.today() + timedelta(days=1)
        self.check_out = self.check_in + timedelta(days=3)

        hotels = await self.bus.execute_query(SearchHotelsQuery("miami"))
        self._print_hotels(hotels)
        if not hotels:
            return

        rooms = await self.bus.execute_query(ListRoomsQuery(hotels[0]))
        self._print_rooms(rooms)

        for room in rooms[:2]:
            added = await self.bus.execute_command(AddToCartCommand(room))
            print(f"🛒 {room.room_type}: {'Room added to cart!' if added else 'No such room available'}")

        summary = await self.bus.execute_query(ViewCartQuery(self.check_in, self.check_out))
        self._print_cart(summary)

        result = await self.bus.execute_command(CheckoutCommand(
            check_in=self.check_in,
            check_out=self.check_out,
            payment=PaymentDetails("Demo", "Guest", "4111-1111-1111-1111")
        ))
        print(f"\n✅ Successfully paid. Booking file created: {result.location}")

    async def run_interactive_mode(self) -> None:
        """Ciclo principal de consola"""
        print("\n🏨 MODO INTERACTIVO (escribe 'help')\n" + "=" * 60)

        await self._login_prompt()
        await self._dates_prompt()

        while True:
            line = (await self._ask("\n> ")).strip()
            if not line:
                continue

            command, _, arg = line.partition(" ")
            command = command.lower()

            try:
                if command in ("quit", "exit"):
                    break
                elif command == "help":
                    print(HELP)
                elif command == "search":
                    self._hotels = await self.bus.execute_query(SearchHotelsQuery(arg.strip()))
                    self._print_hotels(self._hotels)
                elif command == "rooms":
                    hotel = self._pick(self._hotels, arg)
                    if hotel:
                        self._rooms = await self.bus.execute_query(ListRoomsQuery(hotel))
                        print(hotel.get_headline())
                        print(hotel.get_contact_info())
                        self._print_rooms(self._rooms)
                elif command == "add":
                    room = self._pick(self._rooms, arg)
                    if room:
                        added = await self.bus.execute_command(AddToCartCommand(room))
                        print("Room added to cart!" if added else "No such room available")
                elif command == "cart":
                    summary = await self.bus.execute_query(ViewCartQuery(self.check_in, self.check_out))
                    self._print_cart(summary)
                elif command == "checkout":
                    await self._checkout_prompt()
                elif command == "cancel":
                    await self.bus.execute_command(ClearCartCommand())
                    print("Cart cleared")
                elif command == "logout":
                    await self.bus.execute_command(LogoutCommand())
                    await self._login_prompt()
                else:
                    print(f"Comando desconocido: {command}")
            except BookingError as e:
                print(f"⚠️ {e}")

    async def _login_prompt(self) -> None:
        while True:
            email = await self._ask("Email: ")
            password = await self._ask("Password: ")
            try:
                user = await self.bus.execute_command(LoginCommand(email, password))
                print(f"👤 User: {user.nickname}")
                return
            except BookingError as e:
                print(f"⚠️ {e}")

    async def _dates_prompt(self) -> None:
        while True:
            try:
                self.check_in = date.fromisoformat((await self._ask("Check-in Date (YYYY-MM-DD): ")).strip())
                self.check_out = date.fromisoformat((await self._ask("Check-out Date (YYYY-MM-DD): ")).strip())
                validate_stay(self.check_in, self.check_out, date.today())
                return
            except ValueError:
                print("⚠️ Please select dates.")
            except BookingError as e:
                print(f"⚠️ {e}")

    async def _checkout_prompt(self) -> None:
        payment = PaymentDetails(
            name=await self._ask("Name: "),
            surname=await self._ask("Surname: "),
            card_number=await self._ask("Card Number (XXXX-XXXX-XXXX-XXXX): ")
        )
        result = await self.bus.execute_command(CheckoutCommand(self.check_in, self.check_out, payment))
        print(f"✅ Successfully paid. Booking file created: {result.location}")

    async def _ask(self, prompt: str) -> str:
        # input() bloquea: fuera del loop
        return await self._loop.run_in_executor(None, input, prompt)

    @staticmethod
    def _pick(items: list, arg: str):
        try:
            return items[int(arg) - 1]
        except (ValueError, IndexError):
            print("⚠️ Número inválido")
            return None

    @staticmethod
    def _print_hotels(hotels: List[Hotel]) -> None:
        if not hotels:
            print("No hotels available")
        for i, hotel in enumerate(hotels, start=1):
            print(f"  [{i}] {hotel.get_headline()} - {hotel.description}")

    def _print_rooms(self, rooms: List[Room]) -> None:
        if not rooms:
            print("No rooms available")
        for i, room in enumerate(rooms, start=1):
            total = self.container.get_cart().calculate_total_price(room, self.check_in, self.check_out)
            print(f"  [{i}] {room.room_type}: ${room.price_per_night}/night, "
                  f"total ${total}, available {room.available} - {room.description}")

    @staticmethod
    def _print_cart(summary: Receipt) -> None:
        if summary.is_empty():
            print("Your cart is empty")
            return
        print("Your Booked Rooms")
        for line in summary.lines:
            print(f"  {line.hotel_name} - {line.city} | {line.room.room_type} | Price: ${format_price(line.price)}")
        print("----------------------------------------")
        print(f"Total Price: ${format_price(summary.total)}")


async def main():
    load_dotenv()
    settings = Settings()

    # Configuración de Logging
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    app = HotelBookingApp(settings)

    try:
        await app.initialize()
        # Simple selector de modo
        mode = sys.argv[1] if len(sys.argv) > 1 else "interactive"
        if mode == "demo": await app.run_demo_mode()
        else: await app.run_interactive_mode()
    except (KeyboardInterrupt, EOFError):
        logger.info("👋 Deteniendo...")
    except Exception as e:
        logger.critical(f"Error fatal: {e}")
        raise


if __name__ == "__main__":
    asyncio.run(main())
