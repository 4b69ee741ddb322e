"""Runtime settings for the composition root.

Values come from CLI options, each of which can also be supplied through
an environment variable (see ``shopcart.infrastructure.cli.main``).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from shopcart.infrastructure.persistence.stored_cart_repository import DEFAULT_CART_KEY

DEFAULT_API_URL = "http://localhost:3333"
DEFAULT_TIMEOUT = 5.0

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_STORAGE_PATH = Path(__file__).resolve().parents[3] / "data" / "cart.json"


@dataclass(frozen=True)
class Settings:

    api_url: str = DEFAULT_API_URL
    storage_path: Path = DEFAULT_STORAGE_PATH
    storage_key: str = DEFAULT_CART_KEY
    request_timeout: float = DEFAULT_TIMEOUT
    debug: bool = False
