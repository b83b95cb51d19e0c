from prometheus_client import Counter, Gauge

# Business Metrics
kasir_records_created_total = Counter(
    "kasir_records_created_total",
    "Total records created",
    ["resource"] # Labels: 'product', 'category'
)

kasir_not_found_total = Counter(
    "kasir_not_found_total",
    "Lookups, updates and deletes that matched no record",
    ["resource", "operation"] # Labels: operation='get', 'update', 'delete'
)

kasir_store_errors_total = Counter(
    "kasir_store_errors_total",
    "Unclassified failures raised by the backing store",
    ["resource"]
)

kasir_memory_records = Gauge(
    "kasir_memory_records",
    "Number of records held by the in-memory store",
    ["resource"]
)
