"""Shared fixtures for the Amazon product adapter tests."""
import copy
import sys
from pathlib import Path

import pytest

# Make the root-level packages importable without an installed distribution
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


SAMPLE_PRODUCT = {
    "asin": "B0DCPKM21Y",
    "title": "Test Wireless Headphones",
    "brand": "TestBrand",
    "bullet_points": [
        "40-hour battery life",
        "Active noise cancellation",
        "Comfortable design",
    ],
    "description": "Premium wireless headphones for audiophiles.",
    "images": [
        {"url": "https://example.com/img-main.jpg", "variant": "MAIN"},
        {"url": "https://example.com/img-pt01.jpg", "variant": "PT01"},
        {"url": "https://example.com/img-pt02.jpg", "variant": "PT02"},
    ],
    "price": {"amount": "29800", "currency": "JPY"},
    "variations": [
        {"asin": "B0DCPKM21Y", "title": "Black", "dimension": "color_name"},
        {"asin": "B0DCPKM22Z", "title": "White", "dimension": "color_name"},
    ],
    "category": "Electronics > Headphones",
    "features": {
        "battery_life": "40 hours",
        "connectivity": "Bluetooth 5.3",
    },
}


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")


@pytest.fixture
def sample_product():
    """A fully populated Amazon product record (fresh copy per test)."""
    return copy.deepcopy(SAMPLE_PRODUCT)
