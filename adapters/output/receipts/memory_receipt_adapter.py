import logging
from typing import Dict, Optional

from app.ports.output.receipt_port import ReceiptPort

logger = logging.getLogger(__name__)


class InMemoryReceiptAdapter(ReceiptPort):
    """
    Simula el almacenamiento de recibos para desarrollo local y tests.
    No toca el disco.
    """

    def __init__(self):
        self.receipts: Dict[str, str] = {}

    def save_receipt(self, file_name: str, content: str) -> str:
        logger.info(f"📝 [MOCK] Guardando recibo simulado: {file_name}")
        self.receipts[file_name] = content
        return file_name

    def read_receipt(self, location: str) -> Optional[str]:
        return self.receipts.get(location)
