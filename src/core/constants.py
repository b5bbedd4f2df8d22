"""Core constants used across parts catalog modules.

This module centralizes schema names and default values.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_ACTOR = "Admin"
DEFAULT_LOCALE = "en"
SUPPORTED_LOCALES = ("en", "es")
DEFAULT_ROW_POLICY = "lenient"
SUPPORTED_ROW_POLICIES = ("lenient", "warn", "strict")
SYSTEM_HISTORY_SKU = "SYSTEM"
MANUAL_EDIT_DETAILS = "Manual field edit."
CSV_EXTENSION = ".csv"
JSON_EXTENSION = ".json"
SUPPORTED_UPLOAD_EXTENSIONS = (CSV_EXTENSION, JSON_EXTENSION)
PLACEHOLDER_IMAGE_URL = "https://placehold.co/400x400/0f172a/fbbf24?text=NO+IMG"
NEW_PRODUCT_IMAGE_URL = "https://placehold.co/400x400/0f172a/fbbf24?text=NEW"
CSV_DELIMITER = ","
CSV_QUOTE = '"'
UTF8_BOM = "\ufeff"
RECOGNIZED_CSV_HEADERS = (
    "sku",
    "name",
    "brand",
    "category",
    "oem_ref",
    "line",
    "description",
    "image_url",
    "specs_info",
    "make",
    "model",
    "year",
    "engine",
)
CSV_TEMPLATE_HEADERS = (
    "sku",
    "name",
    "brand",
    "category",
    "oem_ref",
    "description",
    "image_url",
    "make",
    "model",
    "year",
    "engine",
)
CSV_TEMPLATE_SAMPLE_ROW = (
    "FIL-001",
    "Premium Oil Filter",
    "Toyota",
    "Engine",
    "90915-YZZF1",
    "High flow oil filter",
    "https://placehold.co/400x400",
    "TOYOTA",
    "Corolla",
    "2015",
    "1.8L",
)
CSV_TEMPLATE_FILE_NAME = "catalog_template.csv"
FILTER_FIELDS = ("make", "model", "year", "category", "search")
SESSION_SPEC_VERSION = 1
