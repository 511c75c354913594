"""Unit tests for item screening lists."""

import pytest

from hsn_compliance.models.screening import CountryScreeningRules, ScreenedItem, ScreeningSeverity
from hsn_compliance.schemas.validation import ShipmentItem
from hsn_compliance.services.item_screening import ItemScreeningTable


@pytest.fixture
def small_screening():
    """Screening table with one global item and one destination."""
    return ItemScreeningTable(
        global_prohibited=[
            ScreenedItem(
                hsn_code="36041000",
                item_name="Fireworks",
                reason="Explosive",
                severity=ScreeningSeverity.PROHIBITED,
            ),
        ],
        countries=[
            CountryScreeningRules(
                country_code="AA",
                country_name="Alphaland",
                screened_items=[
                    ScreenedItem(
                        hsn_code="36041000",
                        item_name="Local fireworks",
                        reason="Allowed with permit",
                        severity=ScreeningSeverity.REQUIRES_LICENSE,
                    ),
                    ScreenedItem(
                        hsn_code="22030000",
                        item_name="Beer",
                        reason="Alcohol ban",
                        severity=ScreeningSeverity.PROHIBITED,
                        alternatives="Non-alcoholic beer",
                    ),
                    ScreenedItem(
                        hsn_code="49019900",
                        item_name="Books",
                        reason="Content review",
                        severity=ScreeningSeverity.RESTRICTED,
                    ),
                ],
                general_restrictions=["Everything is inspected"],
            ),
        ],
    )


class TestCheckItem:
    """Test single item screening."""

    def test_global_list_checked_first(self, small_screening):
        check = small_screening.check_item("36041000", "AA")
        assert check.is_allowed is False
        assert check.restriction.item_name == "Fireworks"

    def test_country_prohibited_item(self, small_screening):
        check = small_screening.check_item("22030000", "AA")
        assert check.is_allowed is False
        assert check.restriction.alternatives == "Non-alcoholic beer"

    def test_country_restricted_item_is_allowed(self, small_screening):
        check = small_screening.check_item("49019900", "AA")
        assert check.is_allowed is True
        assert check.restriction.severity == ScreeningSeverity.RESTRICTED

    def test_unlisted_item(self, small_screening):
        check = small_screening.check_item("61091000", "AA")
        assert check.is_allowed is True
        assert check.restriction is None

    def test_unknown_country_only_checks_global_list(self, small_screening):
        assert small_screening.check_item("22030000", "ZZ").is_allowed is True
        assert small_screening.check_item("36041000", "ZZ").is_allowed is False

    def test_duplicate_countries_rejected(self):
        rules = CountryScreeningRules(country_code="AA", country_name="Alphaland")
        with pytest.raises(ValueError, match="Duplicate country in screening table: AA"):
            ItemScreeningTable([], [rules, rules])


class TestBundledScreening:
    """Test the bundled screening lists."""

    def test_global_weapons_override_country_entry(self, bundled_screening):
        check = bundled_screening.check_item("93040000", "GB")
        assert check.is_allowed is False
        assert check.restriction.item_name == "Weapons, firearms, and ammunition"

    def test_license_items_are_allowed(self, bundled_screening):
        check = bundled_screening.check_item("30049099", "US")
        assert check.is_allowed is True
        assert check.restriction.severity == ScreeningSeverity.REQUIRES_LICENSE

    def test_counterfeit_goods_blocked_for_us(self, bundled_screening):
        check = bundled_screening.check_item("71131900", "US")
        assert check.is_allowed is False
        assert check.restriction.item_name == "Counterfeit goods"

    def test_country_without_screening_list(self, bundled_screening):
        assert bundled_screening.country_rules("JP") is None
        assert bundled_screening.check_item("22030000", "JP").is_allowed is True


class TestScreenShipment:
    """Test shipment screening."""

    def test_screen_shipment_reports_disallowed_items(self, bundled_screening):
        result = bundled_screening.screen_shipment(
            [
                ShipmentItem(hsn_code="22030000", name="Wine"),
                ShipmentItem(hsn_code="33074900", name="Perfume"),
                {"hsn_code": "38220000", "name": "Lab samples"},
                {"hsnCode": "61091000", "name": "T-shirt"},
            ],
            "SA",
        )

        assert result.is_valid is False
        assert [(issue.item_name, issue.hsn_code) for issue in result.issues] == [
            ("Wine", "22030000"),
            ("Lab samples", "38220000"),
        ]
        assert result.issues[0].restriction.reason == "Strictly prohibited under Saudi law"
        assert result.country_rules.country_name == "Saudi Arabia"
        assert result.country_rules.general_restrictions[0] == "Very strict customs regulations"

    def test_screen_clean_shipment_for_unlisted_country(self, bundled_screening):
        result = bundled_screening.screen_shipment(
            [{"hsn_code": "61091000", "name": "T-shirt"}], "DE"
        )
        assert result.is_valid is True
        assert result.issues == []
        assert result.country_rules is None
