"""Runtime configuration for the flight planning engine."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

DEFAULT_HOME_BASES: Mapping[str, str] = {"A": "MAN", "B": "LGW"}
DEFAULT_CURRENCY_SYMBOLS: Tuple[str, ...] = ("£", "$", "€")

_ENV_PREFIX = "FLIGHT_PLANNING_"


@dataclass(frozen=True)
class PlanningConfig:
    """Settings shared by every flight evaluation."""

    home_bases: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_HOME_BASES))
    currency_symbols: Tuple[str, ...] = DEFAULT_CURRENCY_SYMBOLS
    collect_all_failures: bool = False

    def home_base_code(self, home_base: str) -> str:
        try:
            return self.home_bases[home_base]
        except KeyError:
            raise ValueError(f"Unknown home base '{home_base}'") from None

    @property
    def domestic_codes(self) -> Tuple[str, ...]:
        return tuple(self.home_bases.values())


def _coerce_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return default


def build_planning_config(settings: Optional[Mapping[str, Any]] = None) -> PlanningConfig:
    if not settings:
        return PlanningConfig()

    home_bases: Dict[str, str] = dict(DEFAULT_HOME_BASES)
    for base in ("A", "B"):
        code = settings.get(f"home_base_{base.lower()}")
        if code and str(code).strip():
            home_bases[base] = str(code).strip().upper()

    symbols = settings.get("currency_symbols")
    if isinstance(symbols, str):
        currency_symbols = tuple(symbols) or DEFAULT_CURRENCY_SYMBOLS
    elif isinstance(symbols, (list, tuple)):
        currency_symbols = tuple(str(symbol) for symbol in symbols if str(symbol)) or DEFAULT_CURRENCY_SYMBOLS
    else:
        currency_symbols = DEFAULT_CURRENCY_SYMBOLS

    return PlanningConfig(
        home_bases=home_bases,
        currency_symbols=currency_symbols,
        collect_all_failures=_coerce_bool(settings.get("collect_all_failures"), False),
    )


def planning_config_from_env(environ: Optional[Mapping[str, str]] = None) -> PlanningConfig:
    """Build a :class:`PlanningConfig` from ``FLIGHT_PLANNING_*`` variables."""

    source = os.environ if environ is None else environ
    settings = {
        key[len(_ENV_PREFIX):].lower(): value
        for key, value in source.items()
        if key.startswith(_ENV_PREFIX)
    }
    return build_planning_config(settings)
