"""Pytest configuration and fixtures for all tests."""

import tempfile
from pathlib import Path

import pytest
import yaml

from clearedtoplan.core import logging_system

TEST_LOG_DIR = Path(tempfile.mkdtemp(prefix="clearedtoplan-tests-"))
TEST_LOGGING_CONFIG = TEST_LOG_DIR / "logging.yaml"


def pytest_configure(config):
    """Send all test logging into a temporary directory.

    This runs before test modules are imported, so module-level loggers
    never touch the platform log directory.
    """
    TEST_LOGGING_CONFIG.write_text(
        yaml.safe_dump(
            {
                "version": 1,
                "level": "DEBUG",
                "log_dir": str(TEST_LOG_DIR),
                "combined_log": {"enabled": True, "filename": "tests.log", "backup_count": 1},
                "console": {"enabled": False},
                "components": {},
            }
        ),
        encoding="utf-8",
    )
    logging_system.initialize_logging(str(TEST_LOGGING_CONFIG), use_platform_dir=False)


@pytest.fixture
def isolated_logging():
    """Let a test re-initialize logging, then restore the test configuration."""
    yield
    logging_system.shutdown_logging()
    logging_system.initialize_logging(str(TEST_LOGGING_CONFIG), use_platform_dir=False)


@pytest.fixture
def rectangle_envelope():
    """Envelope spanning CG 40-48 in and weight 1500-2000 lbs."""
    from clearedtoplan.geometry import EnvelopePoint

    return [
        EnvelopePoint(weight=2000.0, cg=40.0),
        EnvelopePoint(weight=2000.0, cg=48.0),
        EnvelopePoint(weight=1500.0, cg=48.0),
        EnvelopePoint(weight=1500.0, cg=40.0),
    ]


@pytest.fixture
def cessna_data():
    """Profile mapping for a C172S, as found under the 'aircraft' key."""
    return {
        "id": "c172-test",
        "name": "Cessna 172S",
        "registration": "N12345",
        "type": "C172",
        "category": "single_engine_land",
        "empty_weight": 1680.0,
        "empty_moment": 65150.0,
        "usable_fuel": 53.0,
        "fuel_density": 6.0,
        "fuel_burn_rate": 8.5,
        "stations": [
            {"name": "Front seats", "arm": 37.0},
            {"name": "Rear seats", "arm": 73.0},
            {"name": "Baggage area 1", "arm": 95.0, "max_weight": 120.0},
            {"name": "Baggage area 2", "arm": 123.0, "max_weight": 50.0},
        ],
        "max_ramp_weight": 2558.0,
        "max_takeoff_weight": 2550.0,
        "max_landing_weight": 2550.0,
        "normal_envelope": [
            {"weight": 1500.0, "cg": 35.0},
            {"weight": 1950.0, "cg": 35.0},
            {"weight": 2550.0, "cg": 41.0},
            {"weight": 2550.0, "cg": 47.3},
            {"weight": 1500.0, "cg": 47.3},
        ],
        "utility_envelope": [
            {"weight": 1500.0, "cg": 35.0},
            {"weight": 1950.0, "cg": 35.0},
            {"weight": 2200.0, "cg": 37.5},
            {"weight": 2200.0, "cg": 40.5},
            {"weight": 1500.0, "cg": 40.5},
        ],
        "performance": {
            "takeoff_ground_roll": 960.0,
            "takeoff_over_50ft": 1630.0,
            "landing_ground_roll": 575.0,
            "landing_over_50ft": 1335.0,
            "takeoff_ground_roll_table": [
                {"altitude": 0, "distance": 960},
                {"altitude": 2000, "distance": 1155},
                {"altitude": 4000, "distance": 1390},
            ],
            "cruise": [
                {"rpm": 2300, "altitude_ft": 4000, "tas_kt": 113, "fuel_burn_gph": 8.4},
                {"rpm": 2300, "altitude_ft": 8000, "tas_kt": 117, "fuel_burn_gph": 7.6},
                {"rpm": 2500, "altitude_ft": 4000, "tas_kt": 122, "fuel_burn_gph": 10.0},
                {"rpm": 2500, "altitude_ft": 8000, "tas_kt": 126, "fuel_burn_gph": 9.0},
            ],
        },
    }


@pytest.fixture
def cessna(cessna_data):
    """A C172S aircraft profile."""
    from clearedtoplan.aircraft import AircraftProfile

    return AircraftProfile.from_dict(cessna_data)
