"""Load dashboard settings from a TOML file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
import tomllib

from domain.common import NO_POWERUP

DEFAULT_POWERUP_CATALOGUE: tuple[str, ...] = (
    "Kaktus",
    "Nogica",
    "Magnet",
    "Saka",
    "Ventilator",
    "Plunger",
    "Betman",
    "Teleport",
    "Freeze",
    "Sakica",
    "Boost",
)


@dataclass(frozen=True)
class DashboardConfig:
    """Settings shared by every view the dashboard builds."""

    name: str = "default"
    description: str | None = None
    file_path: Path | None = None
    catalogue: tuple[str, ...] = field(default=DEFAULT_POWERUP_CATALOGUE)
    seed_catalogue: bool = False

    def as_config_json(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "catalogue": list(self.catalogue),
            "seed_catalogue": self.seed_catalogue,
        }


def load_dashboard_config(file_path: Path) -> DashboardConfig:
    """Load and validate one dashboard TOML config file."""
    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")
    if not file_path.is_file():
        raise IsADirectoryError(f"Config path is not a file: {file_path}")

    with file_path.open("rb") as file:
        raw = tomllib.load(file)
    return _parse_dashboard_config(raw, file_path)


def _parse_dashboard_config(raw: dict[str, Any], file_path: Path) -> DashboardConfig:
    dashboard_raw = raw.get("dashboard", {})
    if not isinstance(dashboard_raw, dict):
        raise ValueError(f"{file_path}: [dashboard] must be a table")
    powerups_raw = raw.get("powerups", {})
    if not isinstance(powerups_raw, dict):
        raise ValueError(f"{file_path}: [powerups] must be a table")

    name = str(dashboard_raw.get("name", "default")).strip()
    if not name:
        raise ValueError(f"{file_path}: [dashboard].name must not be empty")

    description_value = dashboard_raw.get("description")
    description = None if description_value is None else str(description_value)

    seed_catalogue = dashboard_raw.get("seed_catalogue", False)
    if not isinstance(seed_catalogue, bool):
        raise ValueError(f"{file_path}: [dashboard].seed_catalogue must be true or false")

    catalogue_raw = powerups_raw.get("catalogue", list(DEFAULT_POWERUP_CATALOGUE))
    if not isinstance(catalogue_raw, list):
        raise ValueError(f"{file_path}: [powerups].catalogue must be a list of names")
    catalogue = tuple(str(item).strip() for item in catalogue_raw)
    _validate_catalogue(file_path=file_path, catalogue=catalogue)

    return DashboardConfig(
        name=name,
        description=description,
        file_path=file_path,
        catalogue=catalogue,
        seed_catalogue=seed_catalogue,
    )


def _validate_catalogue(*, file_path: Path, catalogue: tuple[str, ...]) -> None:
    if not catalogue:
        raise ValueError(f"{file_path}: [powerups].catalogue must not be empty")
    if any(not item for item in catalogue):
        raise ValueError(f"{file_path}: [powerups].catalogue contains an empty name")
    if NO_POWERUP in catalogue:
        raise ValueError(f"{file_path}: [powerups].catalogue must not list '{NO_POWERUP}'")
    if len(catalogue) != len(set(catalogue)):
        raise ValueError(f"{file_path}: duplicate power-up names in [powerups].catalogue: {list(catalogue)}")


__all__ = ["DEFAULT_POWERUP_CATALOGUE", "DashboardConfig", "load_dashboard_config"]
