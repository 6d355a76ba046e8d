import logging
from pathlib import Path
from typing import Optional

from app.domain.errors import ReceiptWriteError
from app.ports.output.receipt_port import ReceiptPort

logger = logging.getLogger(__name__)


class TextFileReceiptAdapter(ReceiptPort):
    """
    Escribe cada recibo como un .txt UTF-8 dentro de output_dir
    (por defecto, el directorio de trabajo del proceso).
    """

    def __init__(self, output_dir: str = "."):
        self.output_dir = Path(output_dir)

    def save_receipt(self, file_name: str, content: str) -> str:
        path = self.output_dir / file_name
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            # newline="" para que los \n se escriban tal cual en cualquier SO
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            logger.error(f"❌ Error creando fichero de reserva {path}: {e}")
            raise ReceiptWriteError(f"No se pudo escribir {path}: {e}") from e

        logger.info(f"✓ Fichero de reserva creado: {path}")
        return str(path)

    def read_receipt(self, location: str) -> Optional[str]:
        path = Path(location)
        if not path.exists():
            return None
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
