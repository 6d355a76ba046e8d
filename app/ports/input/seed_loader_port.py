from abc import ABC, abstractmethod

from app.domain.services.catalog_service import Catalog


class SeedLoaderPort(ABC):
    """
    Contrato para la carga inicial del catálogo.
    Cualquier fuente que aporte los campos de Hotel y Room sirve.
    """

    @abstractmethod
    def load(self, catalog: Catalog) -> int:
        """
        Registra hoteles y habitaciones en el catálogo (una sola vez, al arrancar).

        Args:
            catalog: Catálogo destino

        Returns:
            Número de habitaciones cargadas
        """
        pass
