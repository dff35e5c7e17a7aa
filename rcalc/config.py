from __future__ import annotations
import logging
import os
from dataclasses import dataclass, replace
from enum import Enum

from rcalc.errors import ConfigError


class ImaginaryDenominator(str, Enum):
    """How `add` picks the denominator of the imaginary part.

    SHARED reuses the real part's common denominator (legacy results);
    INDEPENDENT uses the common denominator of the imaginary parts.
    """
    SHARED = "shared"
    INDEPENDENT = "independent"


# Defaults
DEFAULT_MAX_DEPTH = 200
DEFAULT_IMAGINARY_DENOMINATOR = ImaginaryDenominator.SHARED
DEFAULT_LOG_LEVEL = "WARNING"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    max_depth: int = DEFAULT_MAX_DEPTH
    imaginary_denominator: ImaginaryDenominator = DEFAULT_IMAGINARY_DENOMINATOR
    strict: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        if self.max_depth < 1:
            raise ConfigError(f"max_depth must be positive, got {self.max_depth}")
        level = str(self.log_level).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"log_level must be a logging level name, got {self.log_level!r}")
        object.__setattr__(self, "log_level", level)

    def with_overrides(self, **overrides) -> Settings:
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if "imaginary_denominator" in changes:
            changes["imaginary_denominator"] = parse_imaginary_denominator(changes["imaginary_denominator"])
        return replace(self, **changes)


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{var} must be an integer, got {raw!r}") from None


def bool_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"{var} must be a boolean flag, got {raw!r}")


def parse_imaginary_denominator(raw: str | ImaginaryDenominator) -> ImaginaryDenominator:
    try:
        return ImaginaryDenominator(raw.strip().lower() if isinstance(raw, str) else raw)
    except ValueError:
        choices = ", ".join(m.value for m in ImaginaryDenominator)
        raise ConfigError(f"imaginary denominator must be one of {choices}, got {raw!r}") from None


def load_settings(**overrides) -> Settings:
    """Build Settings from RCALC_* environment variables, then apply overrides.

    Recognised variables: RCALC_MAX_DEPTH, RCALC_IMAGINARY_DENOMINATOR,
    RCALC_STRICT and RCALC_LOG_LEVEL.
    """
    raw_mode = os.environ.get("RCALC_IMAGINARY_DENOMINATOR")
    settings = Settings(
        max_depth=int_from_env("RCALC_MAX_DEPTH", DEFAULT_MAX_DEPTH),
        imaginary_denominator=(
            parse_imaginary_denominator(raw_mode) if raw_mode and raw_mode.strip() else DEFAULT_IMAGINARY_DENOMINATOR
        ),
        strict=bool_from_env("RCALC_STRICT", False),
        log_level=os.environ.get("RCALC_LOG_LEVEL", "").strip() or DEFAULT_LOG_LEVEL,
    )
    return settings.with_overrides(**overrides)
