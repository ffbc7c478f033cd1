"""Aircraft profile stores.

The calculators never reach for a global profile list. Whoever needs
profiles is handed a store implementing ProfileStore. Profiles can be
seeded from YAML documents with a top-level ``aircraft:`` mapping.

Typical usage:
    store = InMemoryProfileStore(load_profiles("config/aircraft"))
    profile = store.get(session.selected_aircraft_id)
"""

from pathlib import Path
from typing import Protocol

import yaml

from clearedtoplan.aircraft.profile import DEFAULT_FUEL_DENSITY_LB_PER_GAL, AircraftProfile
from clearedtoplan.core.logging_system import get_logger

logger = get_logger(__name__)


class ProfileError(Exception):
    """Raised when an aircraft profile cannot be loaded."""


class ProfileStore(Protocol):
    """Read access to aircraft profiles keyed by identifier."""

    def get(self, aircraft_id: str) -> AircraftProfile | None: ...

    def list(self) -> list[AircraftProfile]: ...


class InMemoryProfileStore:
    """Profile store backed by a dict, preserving insertion order."""

    def __init__(self, profiles: list[AircraftProfile] | None = None) -> None:
        self._profiles: dict[str, AircraftProfile] = {}
        for profile in profiles or []:
            self.add(profile)

    def add(self, profile: AircraftProfile) -> None:
        """Add or replace a profile."""
        self._profiles[profile.id] = profile
        logger.debug("Stored aircraft profile %s (%s)", profile.id, profile.registration)

    def remove(self, aircraft_id: str) -> bool:
        """Remove a profile. Returns False if it was not stored."""
        return self._profiles.pop(aircraft_id, None) is not None

    def get(self, aircraft_id: str) -> AircraftProfile | None:
        return self._profiles.get(aircraft_id)

    def list(self) -> list[AircraftProfile]:
        return list(self._profiles.values())

    def __len__(self) -> int:
        return len(self._profiles)


def load_profile(
    path: str | Path, default_fuel_density: float = DEFAULT_FUEL_DENSITY_LB_PER_GAL
) -> AircraftProfile:
    """Load one aircraft profile from a YAML file.

    Args:
        path: YAML file with a top-level ``aircraft`` mapping.
        default_fuel_density: Density for profiles that omit it (lb/gal).

    Returns:
        The loaded profile.

    Raises:
        ProfileError: If the file is missing, unreadable or invalid.
    """
    path = Path(path)

    if not path.exists():
        raise ProfileError(f"Aircraft profile not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ProfileError(f"Failed to load aircraft profile {path}: {e}") from e

    if not isinstance(document, dict) or not isinstance(document.get("aircraft"), dict):
        raise ProfileError(f"Invalid aircraft profile (no 'aircraft' mapping): {path}")

    try:
        profile = AircraftProfile.from_dict(document["aircraft"], default_fuel_density)
    except ValueError as e:
        raise ProfileError(f"Invalid aircraft profile {path}: {e}") from e

    logger.info(
        "Loaded aircraft profile '%s' (%s) from %s", profile.name, profile.registration, path
    )
    return profile


def load_profiles(
    directory: str | Path, default_fuel_density: float = DEFAULT_FUEL_DENSITY_LB_PER_GAL
) -> list[AircraftProfile]:
    """Load every ``*.yaml`` profile in a directory, sorted by file name.

    Raises:
        ProfileError: If the directory does not exist or a file is invalid.
    """
    directory = Path(directory)

    if not directory.is_dir():
        raise ProfileError(f"Aircraft profile directory not found: {directory}")

    profiles = [load_profile(p, default_fuel_density) for p in sorted(directory.glob("*.yaml"))]
    logger.info("Loaded %d aircraft profiles from %s", len(profiles), directory)
    return profiles
