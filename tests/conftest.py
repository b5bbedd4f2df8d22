"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from core.types import CrossReference, Product, VehicleApplication


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def sample_products() -> list[Product]:
    """Small denormalized catalog covering every filter dimension."""
    return [
        Product(
            sku="FIL-001",
            name="Oil Filter",
            category="Engine",
            oem_ref="90915-YZZF1",
            applications=(
                VehicleApplication(make="TOYOTA", model="Corolla", engine="1.8L", years="2015"),
                VehicleApplication(make="TOYOTA", model="Yaris", engine="1.5L", years="2012"),
            ),
        ),
        Product(
            sku="BRK-010",
            name="Brake Pads",
            category="Brakes",
            oem_ref="04465-02220",
            applications=(
                VehicleApplication(make="TOYOTA", model="Corolla", engine="1.8L", years="2018"),
            ),
            cross_reference=(CrossReference(brand="Bosch", part="BP-1234"),),
        ),
        Product(
            sku="SPK-100",
            name="Spark Plug",
            category="Ignition",
            oem_ref="90919-01253",
            applications=(
                VehicleApplication(make="NISSAN", model="Sentra", engine="1.6L", years="2010"),
            ),
        ),
        Product(sku="UNI-001", name="Wiper Blade", category="Accessories"),
    ]
