# src/hubkube/core/config.py

import logging
import os

from dotenv import load_dotenv

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)


class Config:
    """
    Handles the application's configuration by loading values from environment variables.
    """

    def __init__(self):
        # --- Hub variables ---
        # The hub id can be mounted as a secret; when unset it is discovered
        # from the hub's ClusterVersion resource at startup.
        self.HUB_CLUSTER_ID = self._get_secret("HUB_CLUSTER_ID")

    @staticmethod
    def _get_secret(key: str, default: str = None) -> str:
        """
        Retrieves a secret from a file (mounted volume) or falls back to environment variable.

        Raises:
            PermissionError: If the secret file exists but cannot be read due to permissions.
            IOError: If the secret file exists but cannot be read due to I/O errors.
        """
        secret_file = f"/etc/hubkube/secrets/{key}"
        if os.path.exists(secret_file):
            try:
                with open(secret_file, "r") as f:
                    value = f.read().strip()
                    logging.getLogger(__name__).debug(f"Loaded secret '{key}' from {secret_file}")
                    return value
            except PermissionError as e:
                raise PermissionError(
                    f"Secret file '{secret_file}' exists but cannot be read due to permission denied. "
                    f"Please check file permissions or run with appropriate privileges."
                ) from e
            except (IOError, OSError) as e:
                raise IOError(
                    f"Secret file '{secret_file}' exists but cannot be read: {e}. "
                    f"Please check the file integrity and system resources."
                ) from e
        return os.getenv(key, default)

    # --- Logging variables ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # --- Collection variables ---
    # Empty namespace means ManagedClusterInfo objects are listed across all namespaces.
    MCI_NAMESPACE = os.getenv("MCI_NAMESPACE", "")
    MAX_CONCURRENT_LOOKUPS = int(os.getenv("MAX_CONCURRENT_LOOKUPS", "10"))
    WATCH_TIMEOUT_SECONDS = int(os.getenv("WATCH_TIMEOUT_SECONDS", "300"))

    def validate_instance(self):
        if self.MAX_CONCURRENT_LOOKUPS < 1:
            raise ValueError("MAX_CONCURRENT_LOOKUPS must be at least 1")
        if self.WATCH_TIMEOUT_SECONDS < 0:
            raise ValueError("WATCH_TIMEOUT_SECONDS must not be negative")
        if self.LOG_LEVEL.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR or CRITICAL")
        if not self.HUB_CLUSTER_ID:
            logging.getLogger(__name__).info("HUB_CLUSTER_ID is not set; it will be discovered from the hub.")


# Instantiate the config to be imported by other modules
config = Config()
config.validate_instance()
