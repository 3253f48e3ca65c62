import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ALLOWED_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration loaded from environment variables."""

    # --- Store ---
    # Not validated: an empty or unknown table is reported by DynamoDB itself.
    table_name: str | None

    # --- Optional Variables with Defaults ---
    service_name: str
    log_level: str
    metrics_namespace: str

    @classmethod
    def load_from_env(cls) -> "AppConfig":
        """
        Loads configuration from environment variables, performing validation.
        Fails fast with a ConfigurationError if anything is invalid.
        """
        try:
            table_name = os.getenv("TableName")
            service_name = os.getenv("POWERTOOLS_SERVICE_NAME", "lambda-lessons")
            metrics_namespace = os.getenv(
                "POWERTOOLS_METRICS_NAMESPACE", "LambdaLessons"
            )

            log_level = os.getenv("LOG_LEVEL", "INFO").upper()
            if log_level not in ALLOWED_LOG_LEVELS:
                raise ValueError(
                    f"LOG_LEVEL must be one of {ALLOWED_LOG_LEVELS}, not '{log_level}'"
                )
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid value for an environment variable: {e}"
            ) from e

        return cls(
            table_name=table_name,
            service_name=service_name,
            log_level=log_level,
            metrics_namespace=metrics_namespace,
        )


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """
    Loads the application configuration from environment variables.
    The environment is only read once, on the first call.
    """
    logger.info("Loading application configuration from environment...")
    return AppConfig.load_from_env()
