from typing import Optional

from config.settings import Settings
from app.ports.input.seed_loader_port import SeedLoaderPort
from app.ports.output.receipt_port import ReceiptPort
from app.domain.services.catalog_service import Catalog
from app.domain.services.cart_service import Cart
from app.domain.services.receipt_writer import ReceiptWriter
from app.domain.services.session_service import SessionService
from app.domain.services.checkout_service import CheckoutService
from app.domain.services.command_bus import CommandBus


class DIContainer:
    """
    Contenedor de Inyección de Dependencias.

    Responsable de:
    1. Crear instancias de servicios y adaptadores
    2. Cablear dependencias
    3. Garantizar una sola instancia por contenedor (sin estado global:
       dos contenedores son dos catálogos y dos carritos independientes)
    """

    def __init__(self, settings: Settings):
        """
        Constructor.

        Args:
            settings: Configuración validada
        """
        self.settings = settings

        # Instancias singleton (lazy loading)
        self._catalog: Optional[Catalog] = None
        self._cart: Optional[Cart] = None
        self._receipt_port: Optional[ReceiptPort] = None
        self._receipt_writer: Optional[ReceiptWriter] = None
        self._session_service: Optional[SessionService] = None
        self._checkout_service: Optional[CheckoutService] = None
        self._seed_loader: Optional[SeedLoaderPort] = None
        self._command_bus: Optional[CommandBus] = None

    def get_catalog(self) -> Catalog:
        if self._catalog is None:
            self._catalog = Catalog()
        return self._catalog

    def get_cart(self) -> Cart:
        if self._cart is None:
            self._cart = Cart()
        return self._cart

    def get_receipt_port(self) -> ReceiptPort:
        """
        Factory para el almacenamiento de recibos.
        Decide si escribir en disco o en memoria según configuración.
        """
        if self._receipt_port is None:
            if self.settings.receipt_storage == "file":
                from adapters.output.receipts.text_file_receipt_adapter import TextFileReceiptAdapter
                self._receipt_port = TextFileReceiptAdapter(output_dir=self.settings.receipts_dir)
            else:
                print("⚠️ Recibos en memoria: no se escribirá ningún fichero")
                from adapters.output.receipts.memory_receipt_adapter import InMemoryReceiptAdapter
                self._receipt_port = InMemoryReceiptAdapter()

        return self._receipt_port

    def get_receipt_writer(self) -> ReceiptWriter:
        if self._receipt_writer is None:
            self._receipt_writer = ReceiptWriter(
                receipt_port=self.get_receipt_port(),
                stagger_room_dates=self.settings.stagger_room_dates
            )
        return self._receipt_writer

    def get_session_service(self) -> SessionService:
        if self._session_service is None:
            self._session_service = SessionService()
        return self._session_service

    def get_checkout_service(self) -> CheckoutService:
        if self._checkout_service is None:
            self._checkout_service = CheckoutService(
                cart=self.get_cart(),
                receipt_writer=self.get_receipt_writer(),
                restore_inventory_on_checkout=self.settings.restore_inventory_on_checkout
            )
        return self._checkout_service

    def get_seed_loader(self) -> SeedLoaderPort:
        """
        Factory para la fuente de datos semilla.

        Returns:
            Implementación del contrato SeedLoaderPort
        """
        if self._seed_loader is None:
            if self.settings.seed_source == "sample":
                from adapters.input.seed.sample_seed_loader import SampleSeedLoader
                self._seed_loader = SampleSeedLoader()
            elif self.settings.seed_source == "json":
                from adapters.input.seed.json_seed_loader import JsonSeedLoader
                self._seed_loader = JsonSeedLoader(self.settings.seed_file)
            elif self.settings.seed_source == "spreadsheet":
                from adapters.input.seed.spreadsheet_seed_loader import SpreadsheetSeedLoader
                self._seed_loader = SpreadsheetSeedLoader(self.settings.seed_file)
            else:
                raise ValueError(f"Seed source no soportado: {self.settings.seed_source}")

        return self._seed_loader

    def get_command_bus(self) -> CommandBus:
        if self._command_bus is None:
            self._command_bus = CommandBus(
                catalog=self.get_catalog(),
                cart=self.get_cart(),
                session_service=self.get_session_service(),
                checkout_service=self.get_checkout_service()
            )
        return self._command_bus

    def initialize(self) -> None:
        """
        Inicializa y valida todos los componentes.

        Ejecuta:
        1. Validación de configuración
        2. Carga del catálogo (una sola vez)
        3. Cableado del bus
        """
        print("\n🚀 Inicializando Hotel Booking...")
        print("=" * 60)

        try:
            self.settings.validate()
            print("✓ Configuración validada")

            print("\n📦 Cargando componentes:")

            print(f"  1. Catálogo ({self.settings.seed_source})...", end=" ")
            catalog = self.get_catalog()
            if catalog.is_empty():
                rooms = self.get_seed_loader().load(catalog)
                print(f"✓ ({len(catalog.hotels)} hoteles, {rooms} habitaciones)")
            else:
                print("✓ (ya cargado)")

            print(f"  2. Recibos ({self.settings.receipt_storage})...", end=" ")
            self.get_receipt_writer()
            print("✓")

            print("  3. Command Bus...", end=" ")
            self.get_command_bus()
            print("✓")

            print("\n" + "=" * 60)
            print("✓ Sistema listo\n")

        except Exception as e:
            print(f"\n✗ Error inicializando: {e}")
            raise
