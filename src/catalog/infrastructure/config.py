"""Runtime settings.

Read from environment variables, after loading an optional ``.env`` file
from the working directory:

- ``CATALOG_DATA_DIR``       where products.json / discounts.json live
- ``CATALOG_LOG_LEVEL``      DEBUG, INFO, WARNING (default), ...
- ``CATALOG_DISCOUNT_MODE``  ``compound`` (default) or ``simple``
- ``CATALOG_SHIPPING``       truthy to add shipping to displayed prices
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from catalog.domain.model.discount import DiscountMode

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"", "0", "false", "no", "off"}


class ConfigurationError(Exception):
    """An environment setting has an unusable value."""


@dataclass(frozen=True)
class Settings:
    data_dir: Path = _DEFAULT_DATA_DIR
    log_level: str = "WARNING"
    discount_mode: DiscountMode = DiscountMode.COMPOUND
    include_shipping: bool = False

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def discounts_file(self) -> Path:
        return self.data_dir / "discounts.json"


def load_settings() -> Settings:
    load_dotenv()

    data_dir = os.getenv("CATALOG_DATA_DIR")
    log_level = os.getenv("CATALOG_LOG_LEVEL", "WARNING").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"Unknown log level: {log_level!r}")

    mode = os.getenv("CATALOG_DISCOUNT_MODE", DiscountMode.COMPOUND.value).lower()
    try:
        discount_mode = DiscountMode(mode)
    except ValueError as exc:
        valid = ", ".join(m.value for m in DiscountMode)
        raise ConfigurationError(
            f"Unknown discount mode {mode!r}. Expected one of: {valid}"
        ) from exc

    return Settings(
        data_dir=Path(data_dir).expanduser() if data_dir else _DEFAULT_DATA_DIR,
        log_level=log_level,
        discount_mode=discount_mode,
        include_shipping=_flag("CATALOG_SHIPPING"),
    )


def _flag(name: str) -> bool:
    value = os.getenv(name, "").strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}")
