import os
from dataclasses import dataclass
from dotenv import load_dotenv

# .env is optional; real environment variables take precedence
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    port: int = 8080
    db_conn: str = ""
    store_backend: str = "database"  # "database" or "memory"
    seed_data: bool = True
    db_max_open_conns: int = 5
    db_max_idle_conns: int = 2
    db_echo: bool = False
    log_level: str = "INFO"
    tracing_enabled: bool = True
    otlp_endpoint: str = "http://localhost:4317"
    metrics_enabled: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment (and .env, if present)."""
        return cls(
            port=int(os.getenv("PORT", "8080")),
            db_conn=os.getenv("DB_CONN", ""),
            store_backend=os.getenv("STORE_BACKEND", "database").strip().lower(),
            seed_data=_env_bool("SEED_DATA", "true"),
            db_max_open_conns=int(os.getenv("DB_MAX_OPEN_CONNS", "5")),
            db_max_idle_conns=int(os.getenv("DB_MAX_IDLE_CONNS", "2")),
            db_echo=_env_bool("DB_ECHO", "false"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            tracing_enabled=_env_bool("TRACING_ENABLED", "true"),
            otlp_endpoint=os.getenv("OTLP_ENDPOINT", "http://localhost:4317"),
            metrics_enabled=_env_bool("METRICS_ENABLED", "true"),
        )

    @property
    def uses_memory_store(self) -> bool:
        return self.store_backend == "memory"
