"""Unit tests for reference data loading."""

import json

import pytest

from hsn_compliance.services import reference_data
from hsn_compliance.services.reference_data import (
    ReferenceDataError,
    get_hsn_catalog,
    get_validation_service,
    load_country_restrictions,
    load_hsn_catalog,
    load_hsn_catalog_csv,
    load_item_screening,
)


CSV_HEADER = (
    "code,description,category,requires_license,globally_prohibited,"
    "globally_restricted,restriction_reason,common_names\n"
)


@pytest.fixture
def catalog_csv(tmp_path):
    path = tmp_path / "catalog.csv"
    path.write_text(
        CSV_HEADER
        + "01012100,Pure-bred horses,Live Animals,true,false,TRUE,Veterinary certificate required,horse;pony\n"
        + "61091000,Cotton t-shirts,Textiles,false,false,false,,t-shirt; shirt ;\n",
        encoding="utf-8",
    )
    return path


class TestBundledData:
    """Test the tables shipped with the package."""

    def test_bundled_catalog(self):
        catalog = load_hsn_catalog()
        assert len(catalog) == 28
        weapons = catalog.lookup("93011000")
        assert weapons.globally_prohibited is True
        assert weapons.restriction_reason == "Weapons and ammunition are strictly prohibited"

    def test_bundled_country_table(self):
        table = load_country_restrictions()
        assert len(table) == 10
        uae = table.lookup("AE")
        assert "Weapons" in uae.prohibited_categories
        assert uae.special_notes[0] == "Alcohol and pork products are strictly prohibited"

    def test_bundled_screening(self):
        screening = load_item_screening()
        assert len(screening.global_prohibited) == 4
        assert screening.country_rules("SG").country_name == "Singapore"


class TestJSONLoading:
    """Test loading replacement tables from JSON."""

    def test_load_custom_catalog(self, tmp_path):
        path = tmp_path / "hsn.json"
        path.write_text(json.dumps([
            {"code": "12121212", "description": "Widgets", "category": "Widgets"},
        ]))
        catalog = load_hsn_catalog(path)
        assert len(catalog) == 1
        assert catalog.lookup("12121212").requires_license is False

    def test_missing_file(self, tmp_path):
        with pytest.raises(ReferenceDataError, match="Unable to read reference data file"):
            load_hsn_catalog(tmp_path / "missing.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{")
        with pytest.raises(ReferenceDataError):
            load_country_restrictions(path)

    def test_invalid_entry(self, tmp_path):
        path = tmp_path / "hsn.json"
        path.write_text(json.dumps([{"code": "123", "description": "Short", "category": "X"}]))
        with pytest.raises(ReferenceDataError, match="Invalid HSN catalog"):
            load_hsn_catalog(path)

    def test_duplicate_codes(self, tmp_path):
        entry = {"code": "12121212", "description": "Widgets", "category": "Widgets"}
        path = tmp_path / "hsn.json"
        path.write_text(json.dumps([entry, entry]))
        with pytest.raises(ReferenceDataError, match="Duplicate HSN code"):
            load_hsn_catalog(path)

    def test_screening_file_must_be_object(self, tmp_path):
        path = tmp_path / "screening.json"
        path.write_text("[]")
        with pytest.raises(ReferenceDataError, match="must contain an object"):
            load_item_screening(path)

    def test_reference_data_error_is_value_error(self):
        assert issubclass(ReferenceDataError, ValueError)


class TestCSVImport:
    """Test importing the HSN catalog from CSV."""

    def test_import_csv(self, catalog_csv):
        catalog = load_hsn_catalog_csv(catalog_csv)

        assert len(catalog) == 2
        horses = catalog.lookup("01012100")
        assert horses is not None
        assert horses.requires_license is True
        assert horses.globally_prohibited is False
        assert horses.globally_restricted is True
        assert horses.common_names == ("horse", "pony")

        shirts = catalog.lookup("61091000")
        assert shirts.restriction_reason is None
        assert shirts.common_names == ("t-shirt", "shirt")

    def test_missing_columns(self, tmp_path):
        path = tmp_path / "catalog.csv"
        path.write_text("code,description\n61091000,Shirts\n")
        with pytest.raises(ReferenceDataError, match="missing columns: category"):
            load_hsn_catalog_csv(path)

    def test_invalid_boolean(self, tmp_path):
        path = tmp_path / "catalog.csv"
        path.write_text(CSV_HEADER + "61091000,Shirts,Textiles,maybe,false,false,,shirt\n")
        with pytest.raises(ReferenceDataError, match="Row 2: invalid boolean 'maybe'"):
            load_hsn_catalog_csv(path)

    def test_invalid_code(self, tmp_path):
        path = tmp_path / "catalog.csv"
        path.write_text(CSV_HEADER + "6109,Shirts,Textiles,false,false,false,,shirt\n")
        with pytest.raises(ReferenceDataError, match="Row 2"):
            load_hsn_catalog_csv(path)

    def test_duplicate_rows(self, tmp_path):
        row = "61091000,Shirts,Textiles,false,false,false,,shirt\n"
        path = tmp_path / "catalog.csv"
        path.write_text(CSV_HEADER + row + row)
        with pytest.raises(ReferenceDataError, match="Duplicate HSN code"):
            load_hsn_catalog_csv(path)

    def test_missing_csv(self, tmp_path):
        with pytest.raises(ReferenceDataError, match="Unable to read HSN catalog CSV"):
            load_hsn_catalog_csv(tmp_path / "missing.csv")


class TestSharedInstances:
    """Test the process-wide table and service getters."""

    def test_validation_service_is_shared(self):
        assert get_validation_service() is get_validation_service()
        assert get_validation_service().catalog is get_hsn_catalog()

    def test_catalog_path_from_settings(self, monkeypatch, catalog_csv):
        monkeypatch.setattr(reference_data.settings, "HSN_CATALOG_PATH", str(catalog_csv))
        get_hsn_catalog.cache_clear()
        try:
            catalog = get_hsn_catalog()
            assert len(catalog) == 2
            assert "01012100" in catalog
        finally:
            get_hsn_catalog.cache_clear()
