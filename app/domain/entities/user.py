from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    Usuario de la sesión actual.
    Solo vive en memoria; el password no se usa para nada.
    """
    email: str
    password: str
    real_name: Optional[str] = None
    surname: Optional[str] = None

    @property
    def nickname(self) -> str:
        """Parte local del email (antes de '@')"""
        return self.email.split("@")[0]

    def set_payment_name(self, real_name: str, surname: str) -> None:
        """Guarda nombre y apellido capturados al pagar"""
        self.real_name = real_name
        self.surname = surname

    def get_full_name(self) -> Optional[str]:
        """Nombre completo solo si ambos campos fueron capturados"""
        if self.real_name is None or self.surname is None:
            return None
        return f"{self.real_name} {self.surname}"


@dataclass
class PaymentDetails:
    """Datos introducidos en el formulario de pago (la tarjeta nunca se persiste)"""
    name: str
    surname: str
    card_number: str
