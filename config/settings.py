import os
from dataclasses import dataclass, field
from typing import Literal


def _env_flag(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class Settings:
    """
    Configuración centralizada desde variables de entorno (.env).

    Todas las configuraciones se cargan desde .env usando python-dotenv.
    Esto permite cambiar configuración sin modificar código.
    """

    # =========================================================================
    # Receipts
    # =========================================================================
    receipt_storage: Literal["file", "memory"] = field(default_factory=lambda: os.getenv("RECEIPT_STORAGE", "file"))
    receipts_dir: str = field(default_factory=lambda: os.getenv("RECEIPTS_DIR", "."))
    stagger_room_dates: bool = field(default_factory=lambda: _env_flag("STAGGER_ROOM_DATES"))

    # =========================================================================
    # Catalog seed
    # =========================================================================
    seed_source: Literal["sample", "json", "spreadsheet"] = field(default_factory=lambda: os.getenv("SEED_SOURCE", "sample"))
    seed_file: str = field(default_factory=lambda: os.getenv("SEED_FILE", ""))

    # =========================================================================
    # Checkout
    # =========================================================================
    # True reproduce el comportamiento antiguo: el pago devuelve el inventario
    restore_inventory_on_checkout: bool = field(default_factory=lambda: _env_flag("RESTORE_INVENTORY_ON_CHECKOUT"))

    # =========================================================================
    # Logging
    # =========================================================================
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    def validate(self) -> None:
        """
        Valida que la configuración sea completa.

        Raises:
            ValueError: Si faltan configuraciones críticas
        """
        errors = []

        if self.receipt_storage not in ("file", "memory"):
            errors.append(f"❌ RECEIPT_STORAGE debe ser 'file' o 'memory', recibido: {self.receipt_storage}")

        if self.receipt_storage == "file" and not self.receipts_dir:
            errors.append("❌ RECEIPTS_DIR requerido para RECEIPT_STORAGE=file")

        if self.seed_source not in ("sample", "json", "spreadsheet"):
            errors.append(f"❌ SEED_SOURCE debe ser 'sample', 'json' o 'spreadsheet', recibido: {self.seed_source}")

        if self.seed_source in ("json", "spreadsheet") and not self.seed_file:
            errors.append(f"❌ SEED_FILE requerido para SEED_SOURCE={self.seed_source}")

        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"❌ LOG_LEVEL inválido: {self.log_level}")

        if errors:
            raise ValueError("Configuración inválida:\n" + "\n".join(errors))
