"""Configuration helpers shared by the CLI, pipeline, and dashboard."""
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_STORE_PATH = Path("output/records.json")


def get_config_value(key: str, default: str = "") -> str:
    """Get configuration value from Streamlit secrets or environment variables.

    Streamlit secrets win when the dashboard runs in the cloud; local runs and
    the CLI fall back to the environment.
    """
    try:
        import streamlit as st
        if hasattr(st, "secrets") and key in st.secrets:
            return str(st.secrets[key])
    except (ImportError, FileNotFoundError, KeyError):
        pass

    return os.getenv(key, default)


def load_env_file(path: Path) -> None:
    """Load ``KEY=value`` lines into the environment without overriding it."""
    if not path.exists():
        return

    try:
        with path.open(encoding="utf-8") as handle:
            for raw_line in handle:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, value = line.split("=", 1)
                key = key.strip()
                if not key or key in os.environ:
                    continue
                os.environ[key] = value.strip().strip('"').strip("'")
    except OSError as exc:
        logger.debug("Could not load env file %s: %s", path, exc)


def store_path() -> Path:
    """Return where the dashboard persists the record table."""
    return Path(get_config_value("VOUCHER_STORE_PATH", str(DEFAULT_STORE_PATH)))
