import asyncio
from datetime import date, timedelta
from unittest.mock import MagicMock

from app.domain.commands import (
    LoginCommand,
    SearchHotelsQuery,
    ListRoomsQuery,
    AddToCartCommand,
    CheckoutCommand
)
from app.domain.entities.hotel import Hotel
from app.domain.entities.room import Room
from app.domain.entities.user import PaymentDetails
from app.domain.errors import ReceiptWriteError
from app.domain.services.cart_service import Cart
from app.domain.services.catalog_service import Catalog
from app.domain.services.checkout_service import CheckoutService
from app.domain.services.command_bus import CommandBus
from app.domain.services.receipt_writer import ReceiptWriter
from app.domain.services.session_service import SessionService
from app.ports.output.receipt_port import ReceiptPort


async def main():
    print("--- 🧪 INICIANDO PRUEBA: DISCO LLENO EN EL CHECKOUT ---")

    # 1. Setup catálogo mínimo
    catalog = Catalog()
    hotel = Hotel("Test Hotel", "+100", 3, "Springfield", "Verification hotel")
    room = Room(hotel, "Standard", 100, 2, "Plain room")
    catalog.add_hotel(hotel)
    catalog.add_room(room)

    # 2. Receipt port que falla (simula disco lleno)
    failing_port = MagicMock(spec=ReceiptPort)
    failing_port.save_receipt.side_effect = ReceiptWriteError("No space left on device")

    cart = Cart()
    bus = CommandBus(
        catalog=catalog,
        cart=cart,
        session_service=SessionService(),
        checkout_service=CheckoutService(cart, ReceiptWriter(failing_port))
    )

    await bus.execute_command(LoginCommand("tester@example.com", "secret"))
    hotels = await bus.execute_query(SearchHotelsQuery("SPRINGFIELD"))
    rooms = await bus.execute_query(ListRoomsQuery(hotels[0]))
    await bus.execute_command(AddToCartCommand(rooms[0]))
    print(f"🛒 En carrito: {len(cart)} | Disponibles: {room.available}")

    check_in = date.today() + timedelta(days=1)
    cmd = CheckoutCommand(check_in, check_in + timedelta(days=3),
                          PaymentDetails("Test", "User", "1234567812345678"))

    # 3. El pago debe fallar SIN vaciar el carrito
    print("\n[ESCENARIO] Checkout con fallo de escritura")
    try:
        await bus.execute_command(cmd)
        print("❌ Test Failed: se esperaba ReceiptWriteError")
    except ReceiptWriteError as e:
        print(f"📢 Error reportado: {e}")
        if len(cart) == 1 and room.available == 1:
            print("✅ PASS: carrito e inventario intactos")
        else:
            print("❌ FAIL: el carrito cambió tras el fallo")

    print("\n--- ✅ PRUEBA COMPLETADA ---")

if __name__ == "__main__":
    asyncio.run(main())
