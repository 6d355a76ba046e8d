from abc import ABC, abstractmethod
from typing import Optional


class ReceiptPort(ABC):
    """
    Contrato para guardar los ficheros de confirmación ya renderizados.
    Define comportamiento sin acoplar tecnología (disco, memoria, ...).
    """

    @abstractmethod
    def save_receipt(self, file_name: str, content: str) -> str:
        """
        Guarda una confirmación.

        Args:
            file_name: Nombre generado ({yyyyMMdd}_{nickname}_{id}.txt)
            content: Texto completo del recibo

        Returns:
            Ubicación donde quedó guardado

        Raises:
            ReceiptWriteError: Si no se pudo escribir
        """
        pass

    @abstractmethod
    def read_receipt(self, location: str) -> Optional[str]:
        """
        Lee una confirmación guardada.

        Returns:
            Contenido o None si no existe
        """
        pass
