import asyncio
import logging
from typing import Any, Type, Callable, Dict, Awaitable, List

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
from app.domain.entities.receipt import CheckoutResult, Receipt
from app.domain.entities.room import Room
from app.domain.entities.user import User
from app.domain.services.cart_service import Cart
from app.domain.services.catalog_service import Catalog
from app.domain.services.checkout_service import CheckoutService
from app.domain.services.session_service import SessionService

logger = logging.getLogger(__name__)


class CommandBus:
    """
    Bus de Comandos: punto de entrada único para los front-ends.

    Los servicios de dominio son síncronos. Las búsquedas en el catálogo se
    ejecutan en el executor por defecto para no bloquear el loop del front-end;
    el resto de comandos corre inline.
    """

    def __init__(self,
                 catalog: Catalog,
                 cart: Cart,
                 session_service: SessionService,
                 checkout_service: CheckoutService):

        self.catalog = catalog
        self.cart = cart
        self.session_service = session_service
        self.checkout_service = checkout_service

        # Registro de Handlers
        self._handlers: Dict[Type, Callable[[Any], Awaitable[Any]]] = {
            LoginCommand: self._handle_login,
            LogoutCommand: self._handle_logout,
            SearchHotelsQuery: self._handle_search_hotels,
            ListRoomsQuery: self._handle_list_rooms,
            AddToCartCommand: self._handle_add_to_cart,
            ViewCartQuery: self._handle_view_cart,
            ClearCartCommand: self._handle_clear_cart,
            CheckoutCommand: self._handle_checkout
        }

    async def execute_command(self, command: Any) -> Any:
        """Ejecuta un comando."""
        handler = self._handlers.get(type(command))
        if not handler:
            raise ValueError(f"No handler registered for command: {type(command)}")

        try:
            return await handler(command)
        except Exception as e:
            logger.error(f"🔥 Error ejecutando comando {type(command).__name__}: {e}")
            raise

    async def execute_query(self, query: Any) -> Any:
        """Ejecuta una query (alias de execute_command por ahora)."""
        return await self.execute_command(query)

    async def _run_in_worker(self, func: Callable, *args) -> Any:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, func, *args)

    # --- Handlers ---

    async def _handle_login(self, cmd: LoginCommand) -> User:
        return self.session_service.login(cmd.email, cmd.password)

    async def _handle_logout(self, cmd: LogoutCommand) -> None:
        self.session_service.logout()

    async def _handle_search_hotels(self, query: SearchHotelsQuery) -> List[Hotel]:
        return await self._run_in_worker(self.catalog.find_hotels_by_city, query.city)

    async def _handle_list_rooms(self, query: ListRoomsQuery) -> List[Room]:
        return await self._run_in_worker(self.catalog.find_rooms_by_hotel, query.hotel)

    async def _handle_add_to_cart(self, cmd: AddToCartCommand) -> bool:
        return self.cart.add_to_cart(cmd.room)

    async def _handle_view_cart(self, query: ViewCartQuery) -> Receipt:
        return self.checkout_service.summarize(query.check_in, query.check_out)

    async def _handle_clear_cart(self, cmd: ClearCartCommand) -> None:
        self.checkout_service.cancel()

    async def _handle_checkout(self, cmd: CheckoutCommand) -> CheckoutResult:
        return self.checkout_service.checkout(
            user=self.session_service.current_user,
            check_in=cmd.check_in,
            check_out=cmd.check_out,
            payment=cmd.payment
        )
