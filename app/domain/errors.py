class BookingError(Exception):
    """Error base del dominio de reservas"""


class LoginError(BookingError):
    """Datos de login vacíos o con formato inválido"""


class InvalidStayError(BookingError):
    """Fechas de estancia ausentes o incoherentes"""


class PaymentValidationError(BookingError):
    """Formulario de pago incompleto o tarjeta con formato inválido"""


class EmptyCartError(BookingError):
    """Se intentó pagar un carrito vacío"""


class ReceiptWriteError(BookingError):
    """No se pudo guardar el fichero de confirmación"""


class SeedDataError(BookingError):
    """Registro de datos semilla incompleto o mal formado"""
