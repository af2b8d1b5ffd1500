"""League settings snapshot - the configuration every calculation receives."""

import json
import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Optional

from src.cap_engine import config

logger = logging.getLogger(__name__)

_CAP_KEY_PREFIX = "salary_cap_"


class LeagueSettingsError(ValueError):
    """Raised when league settings are malformed."""

    pass


@dataclass(frozen=True)
class LeagueSettings:
    """Immutable league configuration passed into every calculation."""

    cap_by_year: Mapping[int, int] = field(
        default_factory=lambda: dict(config.CAP_BY_YEAR)
    )
    default_salary_cap: int = config.DEFAULT_SALARY_CAP
    escalation_rate: float = config.ESCALATION_RATE
    roster_size: int = config.ROSTER_SIZE
    practice_squad_max: int = config.PRACTICE_SQUAD_MAX
    practice_squad_cap_pct: float = config.PRACTICE_SQUAD_CAP_PCT
    practice_squad_max_years: int = config.PRACTICE_SQUAD_MAX_YEARS
    ir_max: int = config.IR_MAX
    ir_cap_pct: float = config.IR_CAP_PCT
    free_agent_minimum: int = config.FREE_AGENT_MINIMUM
    reacquisition_threshold: int = config.REACQUISITION_THRESHOLD
    loyalty_bump_year: int = config.LOYALTY_BUMP_YEAR
    loyalty_bump_amount: int = config.LOYALTY_BUMP_AMOUNT
    low_cap_space_buffer: int = config.LOW_CAP_SPACE_BUFFER
    minimum_veterans: int = config.MINIMUM_VETERANS
    veteran_deadline: str = config.VETERAN_DEADLINE
    current_season: int = config.DEFAULT_CURRENT_SEASON

    def __post_init__(self):
        # Read-only copy of the cap table
        object.__setattr__(self, "cap_by_year", MappingProxyType(dict(self.cap_by_year)))

        errors = []

        if self.escalation_rate < 0:
            errors.append(f"escalation_rate must be >= 0, got {self.escalation_rate}")
        for name in ("practice_squad_cap_pct", "ir_cap_pct"):
            value = getattr(self, name)
            if not 0 <= value <= 1:
                errors.append(f"{name} must be between 0 and 1, got {value}")
        for name in ("roster_size", "practice_squad_max", "ir_max", "loyalty_bump_year"):
            value = getattr(self, name)
            if value < 1:
                errors.append(f"{name} must be a positive integer, got {value}")
        for name in (
            "practice_squad_max_years",
            "free_agent_minimum",
            "reacquisition_threshold",
            "loyalty_bump_amount",
            "low_cap_space_buffer",
            "minimum_veterans",
        ):
            value = getattr(self, name)
            if value < 0:
                errors.append(f"{name} must be >= 0, got {value}")
        for year, cap in self.cap_by_year.items():
            if cap < 0:
                errors.append(f"salary cap for {year} must be >= 0, got {cap}")

        if errors:
            raise LeagueSettingsError("; ".join(errors))

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def salary_cap_for(self, year: int) -> int:
        """Cap for ``year``, or the default cap when the year is not configured."""
        return self.cap_by_year.get(year, self.default_salary_cap)

    def salary_years_for_display(self) -> List[int]:
        """Current season plus the two following seasons."""
        return [self.current_season + offset for offset in range(3)]

    def with_overrides(self, **changes) -> "LeagueSettings":
        """Copy of these settings with some fields replaced (validated again)."""
        return replace(self, **changes)

    # ------------------------------------------------------------------
    # Construction from stored key/value rows
    # ------------------------------------------------------------------

    @classmethod
    def from_key_values(cls, values: Mapping[str, object]) -> "LeagueSettings":
        """Build settings from ``key -> value`` rows as stored by the league.

        Values may be strings (as persisted) or numbers. Per-year caps use
        keys of the form ``salary_cap_<year>`` and are layered over the
        default cap table. Missing keys fall back to defaults.

        Raises:
            LeagueSettingsError: If any value cannot be parsed or is out of range.
        """
        field_types = {f.name: f.type for f in fields(cls) if f.name != "cap_by_year"}
        kwargs = {}
        cap_by_year = dict(config.CAP_BY_YEAR)

        for key, raw in values.items():
            if key.startswith(_CAP_KEY_PREFIX):
                year_text = key[len(_CAP_KEY_PREFIX):]
                year = _parse(key, year_text, int)
                cap_by_year[year] = _parse(key, raw, int)
            elif key in field_types:
                kwargs[key] = _parse(key, raw, field_types[key])
            else:
                logger.debug("Ignoring unknown league setting %r", key)

        return cls(cap_by_year=cap_by_year, **kwargs)


def _parse(key: str, raw: object, kind):
    """Convert one stored setting value to ``kind``."""
    if kind is str or kind == "str":
        return str(raw)
    try:
        if kind is int or kind == "int":
            number = float(raw)
            if not number.is_integer():
                raise ValueError(f"{raw!r} is not a whole number")
            return int(number)
        return float(raw)
    except (TypeError, ValueError) as e:
        raise LeagueSettingsError(f"Invalid value for {key}: {raw!r} ({e})") from e


def load_league_settings(path: Optional[Path] = None) -> LeagueSettings:
    """Load a settings snapshot from a JSON object of ``key -> value`` pairs.

    Args:
        path: JSON file to read. Defaults to ``config.SETTINGS_FILE``.

    Raises:
        FileNotFoundError: If the file does not exist.
        LeagueSettingsError: If the file is not a JSON object or holds bad values.
    """
    path = path or config.SETTINGS_FILE

    if not path.exists():
        raise FileNotFoundError(f"League settings file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise LeagueSettingsError(f"Malformed league settings file {path}: {e}") from e

    if not isinstance(data, dict):
        raise LeagueSettingsError(
            f"League settings file {path} must contain a JSON object"
        )

    settings = LeagueSettings.from_key_values(data)
    logger.info(
        "Loaded league settings from %s (season %d, %d capped years)",
        path,
        settings.current_season,
        len(settings.cap_by_year),
    )
    return settings
