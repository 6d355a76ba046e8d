import logging
import re
from dataclasses import replace
from datetime import date
from typing import Callable, Optional

from app.domain.entities.receipt import CheckoutResult, Receipt
from app.domain.entities.user import PaymentDetails, User
from app.domain.errors import (
    BookingError,
    EmptyCartError,
    InvalidStayError,
    PaymentValidationError
)
from app.domain.services.cart_service import Cart
from app.domain.services.receipt_writer import ReceiptWriter

logger = logging.getLogger(__name__)

CARD_NUMBER_PATTERNS = (
    re.compile(r"\d{4}-\d{4}-\d{4}-\d{4}"),
    re.compile(r"\d{16}"),
)


def validate_stay(check_in: Optional[date], check_out: Optional[date], today: date) -> None:
    """
    Valida las fechas elegidas antes de buscar o pagar.

    Raises:
        InvalidStayError: Fecha ausente, entrada en el pasado o salida <= entrada
    """
    if check_in is None or check_out is None:
        raise InvalidStayError("Please select dates.")

    if check_in < today:
        raise InvalidStayError("Check-in date cannot be before today.")

    if check_out <= check_in:
        raise InvalidStayError("Check-out date must be after check-in date.")


def validate_payment(details: PaymentDetails) -> None:
    """
    Valida el formulario de pago (no se procesa ningún cobro).

    Raises:
        PaymentValidationError: Campo vacío o tarjeta con formato inválido
    """
    name = (details.name or "").strip()
    surname = (details.surname or "").strip()
    card_number = (details.card_number or "").strip()

    if not name or not surname or not card_number:
        raise PaymentValidationError("Please fill in all fields")

    if not any(pattern.fullmatch(card_number) for pattern in CARD_NUMBER_PATTERNS):
        raise PaymentValidationError("Please enter a valid card number (XXXX-XXXX-XXXX-XXXX)")


class CheckoutService:
    """
    Orquesta el pago simulado:
    validar -> escribir recibo -> vaciar carrito.

    El carrito solo se vacía después de que el recibo se haya guardado.
    """

    def __init__(self,
                 cart: Cart,
                 receipt_writer: ReceiptWriter,
                 restore_inventory_on_checkout: bool = False,
                 today: Callable[[], date] = date.today):
        """
        Constructor.

        Args:
            cart: Carrito de la sesión
            receipt_writer: Generador del fichero de confirmación
            restore_inventory_on_checkout: Comportamiento heredado; devuelve
                el inventario también tras un pago
            today: Reloj inyectable para validar fechas
        """
        self.cart = cart
        self.receipt_writer = receipt_writer
        self.restore_inventory_on_checkout = restore_inventory_on_checkout
        self.today = today

    def summarize(self, check_in: date, check_out: date, user: Optional[User] = None) -> Receipt:
        """Resumen del carrito para mostrarlo (mismo cálculo que el recibo)"""
        return self.receipt_writer.build_receipt(self.cart.get_cart(), user, check_in, check_out)

    def checkout(self,
                 user: Optional[User],
                 check_in: date,
                 check_out: date,
                 payment: PaymentDetails) -> CheckoutResult:
        """
        Completa la reserva.

        Raises:
            BookingError: Sin usuario en sesión
            EmptyCartError: Carrito vacío
            InvalidStayError / PaymentValidationError: Datos inválidos
            ReceiptWriteError: Fallo guardando el recibo (carrito intacto)
        """
        if user is None:
            raise BookingError("No user logged in")

        if self.cart.is_empty():
            raise EmptyCartError("Your cart is empty")

        validate_stay(check_in, check_out, self.today())
        validate_payment(payment)

        # El recibo lleva el nombre del pago; el usuario real solo cambia si se guarda
        payer = replace(user, real_name=payment.name.strip(), surname=payment.surname.strip())
        receipt = self.summarize(check_in, check_out, payer)
        location = self.receipt_writer.save(receipt)
        user.set_payment_name(payer.real_name, payer.surname)

        if self.restore_inventory_on_checkout:
            self.cart.clear_cart()
        else:
            self.cart.commit_cart()

        logger.info(f"💳 Pago completado por {user.nickname}: {location}")
        return CheckoutResult(location=location, receipt=receipt)

    def cancel(self) -> None:
        """Cancela el carrito (devuelve el inventario)"""
        self.cart.clear_cart()
