from dataclasses import dataclass


@dataclass(frozen=True)
class Hotel:
    """
    Información estática del hotel.
    Python puro, sin dependencias.
    """
    name: str
    phone: str
    stars: int
    city: str
    description: str = ""

    def __post_init__(self):
        """Validación"""
        if not 1 <= self.stars <= 5:
            raise ValueError(f"stars debe estar entre 1 y 5, recibido: {self.stars}")

    def get_contact_info(self) -> str:
        """Retorna información de contacto formateada"""
        return f"{self.name} - Tel: {self.phone}"

    def get_headline(self) -> str:
        """Retorna nombre y estrellas (para listados)"""
        return f"{self.name} - {self.stars} stars"
