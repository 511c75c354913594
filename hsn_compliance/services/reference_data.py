"""
Reference data loading for the customs tables

The HSN catalog, country restriction table and item screening lists ship as
JSON files in ``hsn_compliance/data``. Each can be replaced through settings
with another JSON file, and the HSN catalog can also be imported from CSV.
Tables are built once per process and shared read-only.
"""
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, List, Optional, Union

import pandas as pd
from pydantic import TypeAdapter

from ..core.config import settings
from ..models.country_restriction import CountryRestrictionEntry
from ..models.hsn_code import HSNEntry
from ..models.screening import CountryScreeningRules, ScreenedItem
from .country_restrictions import CountryRestrictionTable
from .hsn_catalog import HSNCatalog
from .item_screening import ItemScreeningTable
from .validation_service import CustomsValidationService

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"

HSN_CSV_COLUMNS = [
    "code",
    "description",
    "category",
    "requires_license",
    "globally_prohibited",
    "globally_restricted",
    "restriction_reason",
    "common_names",
]

_TRUE_VALUES = {"true", "1", "yes", "y"}
_FALSE_VALUES = {"false", "0", "no", "n", ""}

PathLike = Union[str, Path]


class ReferenceDataError(ValueError):
    """Raised when a reference data file cannot be read or is invalid"""


def _resolve(path: Optional[PathLike], default_name: str) -> Path:
    return Path(path) if path else DATA_DIR / default_name


def _read_json(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as fh:
            return json.load(fh)
    except (OSError, json.JSONDecodeError) as e:
        raise ReferenceDataError(f"Unable to read reference data file {path}: {e}") from e


def _parse_bool(value: str, column: str, row: int) -> bool:
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ReferenceDataError(f"Row {row}: invalid boolean '{value}' in column '{column}'")


def load_hsn_catalog(path: Optional[PathLike] = None) -> HSNCatalog:
    """Load the HSN catalog from a JSON list of entries"""
    path = _resolve(path, "hsn_codes.json")
    raw = _read_json(path)
    try:
        entries = TypeAdapter(List[HSNEntry]).validate_python(raw)
        catalog = HSNCatalog(entries)
    except ValueError as e:
        raise ReferenceDataError(f"Invalid HSN catalog in {path}: {e}") from e
    logger.info(f"Loaded HSN catalog from {path}")
    return catalog


def load_hsn_catalog_csv(path: PathLike) -> HSNCatalog:
    """
    Import an HSN catalog from CSV

    Args:
        path: CSV file with the HSN_CSV_COLUMNS header; common names are
            separated by semicolons

    Returns:
        HSNCatalog built from the rows in file order
    """
    path = Path(path)
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except (OSError, ValueError) as e:
        raise ReferenceDataError(f"Unable to read HSN catalog CSV {path}: {e}") from e

    df.columns = [str(column).strip().lower() for column in df.columns]
    missing = [column for column in HSN_CSV_COLUMNS if column not in df.columns]
    if missing:
        raise ReferenceDataError(f"HSN catalog CSV {path} is missing columns: {', '.join(missing)}")

    entries = []
    for index, row in df.iterrows():
        row_number = index + 2  # header is line 1
        try:
            entries.append(HSNEntry(
                code=row["code"].strip(),
                description=row["description"].strip(),
                category=row["category"].strip(),
                requires_license=_parse_bool(row["requires_license"], "requires_license", row_number),
                globally_prohibited=_parse_bool(row["globally_prohibited"], "globally_prohibited", row_number),
                globally_restricted=_parse_bool(row["globally_restricted"], "globally_restricted", row_number),
                restriction_reason=row["restriction_reason"].strip() or None,
                common_names=[name.strip() for name in row["common_names"].split(";") if name.strip()],
            ))
        except ReferenceDataError:
            raise
        except ValueError as e:
            raise ReferenceDataError(f"Row {row_number} of {path} is invalid: {e}") from e

    try:
        catalog = HSNCatalog(entries)
    except ValueError as e:
        raise ReferenceDataError(f"Invalid HSN catalog in {path}: {e}") from e
    logger.info(f"Imported {len(catalog)} HSN codes from CSV {path}")
    return catalog


def load_country_restrictions(path: Optional[PathLike] = None) -> CountryRestrictionTable:
    """Load the country restriction table from a JSON list of entries"""
    path = _resolve(path, "country_restrictions.json")
    raw = _read_json(path)
    try:
        entries = TypeAdapter(List[CountryRestrictionEntry]).validate_python(raw)
        table = CountryRestrictionTable(entries)
    except ValueError as e:
        raise ReferenceDataError(f"Invalid country restriction table in {path}: {e}") from e
    logger.info(f"Loaded country restrictions from {path}")
    return table


def load_item_screening(path: Optional[PathLike] = None) -> ItemScreeningTable:
    """Load the item screening lists from JSON"""
    path = _resolve(path, "item_screening.json")
    raw = _read_json(path)
    if not isinstance(raw, dict):
        raise ReferenceDataError(f"Item screening file {path} must contain an object")
    try:
        global_items = TypeAdapter(List[ScreenedItem]).validate_python(raw.get("global_prohibited", []))
        countries = TypeAdapter(List[CountryScreeningRules]).validate_python(raw.get("countries", []))
        table = ItemScreeningTable(global_items, countries)
    except ValueError as e:
        raise ReferenceDataError(f"Invalid item screening data in {path}: {e}") from e
    logger.info(f"Loaded item screening lists from {path}")
    return table


@lru_cache(maxsize=1)
def get_hsn_catalog() -> HSNCatalog:
    path = settings.HSN_CATALOG_PATH
    if path and Path(path).suffix.lower() == ".csv":
        return load_hsn_catalog_csv(path)
    return load_hsn_catalog(path or None)


@lru_cache(maxsize=1)
def get_country_restrictions() -> CountryRestrictionTable:
    return load_country_restrictions(settings.COUNTRY_RESTRICTIONS_PATH or None)


@lru_cache(maxsize=1)
def get_item_screening() -> ItemScreeningTable:
    return load_item_screening(settings.ITEM_SCREENING_PATH or None)


@lru_cache(maxsize=1)
def get_validation_service() -> CustomsValidationService:
    """Shared validation service over the configured tables"""
    return CustomsValidationService(get_hsn_catalog(), get_country_restrictions())
