"""Shared fixtures for customs validation tests."""

import pytest

from hsn_compliance.models.country_restriction import CountryRestrictionEntry
from hsn_compliance.models.hsn_code import HSNEntry
from hsn_compliance.services.country_restrictions import CountryRestrictionTable
from hsn_compliance.services.hsn_catalog import HSNCatalog
from hsn_compliance.services.reference_data import (
    load_country_restrictions,
    load_hsn_catalog,
    load_item_screening,
)
from hsn_compliance.services.validation_service import CustomsValidationService


@pytest.fixture
def sample_entries():
    """A small catalog covering every flag combination."""
    return [
        HSNEntry(
            code="61091000",
            description="Cotton t-shirts",
            category="Textiles",
            common_names=["t-shirt", "shirt"],
        ),
        HSNEntry(
            code="93011000",
            description="Artillery weapons",
            category="Weapons",
            requires_license=True,
            globally_prohibited=True,
            globally_restricted=True,
            restriction_reason="Weapons are strictly prohibited",
            common_names=["weapon", "gun"],
        ),
        HSNEntry(
            code="30049099",
            description="Other medicaments",
            category="Pharmaceuticals",
            requires_license=True,
            globally_restricted=True,
            restriction_reason="Requires prescription",
            common_names=["medicine", "drug"],
        ),
        HSNEntry(
            code="11112222",
            description="Prohibited curiosity",
            category="Curiosities",
            globally_prohibited=True,
        ),
        HSNEntry(
            code="33333333",
            description="Scented candles",
            category="Home",
            globally_restricted=True,
            common_names=["candle"],
        ),
    ]


@pytest.fixture
def sample_catalog(sample_entries):
    return HSNCatalog(sample_entries)


@pytest.fixture
def sample_country_table():
    """Two destinations: one strict, one without advisory notes."""
    return CountryRestrictionTable([
        CountryRestrictionEntry(
            country_code="AA",
            country_name="Alphaland",
            prohibited_categories=["Weapons", "Home"],
            restricted_categories=["Pharmaceuticals", "Textiles"],
            prohibited_hsn_codes=["93011000"],
            restricted_hsn_codes=["30049099", "61091000"],
            special_notes=["Strict inspection", "Declare all items"],
        ),
        CountryRestrictionEntry(
            country_code="BB",
            country_name="Betaland",
            restricted_hsn_codes=["61091000"],
        ),
    ])


@pytest.fixture
def sample_service(sample_catalog, sample_country_table):
    return CustomsValidationService(sample_catalog, sample_country_table)


@pytest.fixture
def bundled_catalog():
    return load_hsn_catalog()


@pytest.fixture
def bundled_country_table():
    return load_country_restrictions()


@pytest.fixture
def bundled_screening():
    return load_item_screening()


@pytest.fixture
def bundled_service(bundled_catalog, bundled_country_table):
    return CustomsValidationService(bundled_catalog, bundled_country_table)
