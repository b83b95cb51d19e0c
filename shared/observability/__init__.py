from .setup import setup_observability, configure_logging
from .metrics import (
    kasir_records_created_total,
    kasir_not_found_total,
    kasir_store_errors_total,
    kasir_memory_records
)
