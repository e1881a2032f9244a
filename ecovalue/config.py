"""
Configuration module: paths, input layout, lookup tables, and global settings.
"""

from pathlib import Path
import os

# ============================================================================
# PROJECT PATHS (all relative to PROJECT_ROOT)
# ============================================================================

def get_project_root():
    """Auto-detect project root by checking for data/ and ecovalue/ folders."""
    cwd = Path.cwd()

    # If already in project root
    if (cwd / "data").exists() and (cwd / "ecovalue").exists():
        return cwd

    # If in notebooks/ or scripts/
    if cwd.name in ["notebooks", "scripts"] and (cwd.parent / "ecovalue").exists():
        return cwd.parent

    # Fallback: the checkout this module lives in
    return Path(__file__).resolve().parents[1]

PROJECT_ROOT = get_project_root()

# Core data paths
DATA_DIR = PROJECT_ROOT / "data"
ORIGINAL_DIR = DATA_DIR / "original"
PROCESSED_DIR = DATA_DIR / "processed"
OUTPUTS_DIR = PROJECT_ROOT / "outputs"
TABLES_DIR = OUTPUTS_DIR / "tables"
FIGURES_DIR = PROJECT_ROOT / "reports" / "figures"

# Input file (override with ECOVALUE_INPUT)
INPUT_FILE = Path(os.environ.get("ECOVALUE_INPUT", str(ORIGINAL_DIR / "esvd.csv")))

# Output files
OUTPUT_FILES = {
    "valuations_clean": PROCESSED_DIR / "valuations_clean.csv",
    "drop_summary": TABLES_DIR / "drop_summary.csv",
    "by_biome_top_by_service": TABLES_DIR / "by_biome_top_by_service.csv",
    "by_service_by_biome": TABLES_DIR / "by_service_by_biome.csv",
    "fig_by_biome": FIGURES_DIR / "fig_top_biomes_by_service.png",
    "fig_by_service": FIGURES_DIR / "fig_services_by_biome.png",
}

# ============================================================================
# INPUT LAYOUT
# ============================================================================

# 0-based line numbers: the export carries a title line above the header
# and two description lines between the header and the first record.
HEADER_ROW = 1
DATA_START_ROW = 4

# Raw export column -> internal name
COLUMN_MAP = {
    "Biome": "biome",
    "ESService": "es_service",
    "Currency": "currency",
    "Value": "value",
    "ValueType": "value_type",
    "Unit": "unit",
    "ServiceArea": "service_area",
}

REQUIRED_COLUMNS = list(COLUMN_MAP)

# ============================================================================
# CURRENCY NORMALIZATION
# ============================================================================

REFERENCE_CURRENCY = "USD"

# Multiplier into REFERENCE_CURRENCY, keyed by the currency names used in the export
CURRENCY_FACTORS = {
    "US Dollar": 1.0,
    "Euro": 1.11,
    "British Pound": 1.27,
    "Swiss Franc": 1.13,
    "Swedish Krona": 0.095,
    "Norwegian Krone": 0.094,
    "Danish Krone": 0.149,
    "Polish Zloty": 0.25,
    "Czech Koruna": 0.044,
    "Hungarian Forint": 0.0028,
    "Romanian Leu": 0.22,
    "Russian Ruble": 0.011,
    "Turkish Lira": 0.031,
    "Canadian Dollar": 0.74,
    "Mexican Peso": 0.058,
    "Brazilian Real": 0.20,
    "Argentine Peso": 0.0012,
    "Chilean Peso": 0.0011,
    "Colombian Peso": 0.00025,
    "Peruvian Sol": 0.27,
    "Australian Dollar": 0.66,
    "New Zealand Dollar": 0.61,
    "Japanese Yen": 0.0067,
    "Chinese Yuan": 0.14,
    "Indian Rupee": 0.012,
    "Indonesian Rupiah": 0.000064,
    "Malaysian Ringgit": 0.21,
    "Philippine Peso": 0.018,
    "Thai Baht": 0.028,
    "Vietnamese Dong": 0.000041,
    "South Korean Won": 0.00075,
    "South African Rand": 0.054,
    "Kenyan Shilling": 0.0072,
    "Tanzanian Shilling": 0.00039,
}

# ============================================================================
# UNIT / AREA NORMALIZATION
# ============================================================================

ANNUAL_VALUE_TYPES = ["Annual", "Annualized NPV", "Annual (Range)"]

# Unit strings are matched case-insensitively. Only hectare units count as an
# area basis: acre or km2 units are not rescaled and go through the
# service-area division like any other non-area unit.
AREA_UNIT_PATTERN = r"\b(?:ha|hectares?)\b"
PER_CAPITA_UNIT_PATTERN = r"\b(?:person|persons|people|capita|household|households|hh)\b"

# ============================================================================
# SERVICE CLASSIFICATION
# ============================================================================

# Checked in this order; the first list containing a label wins
SERVICE_CATEGORIES = {
    "Human Happiness": [
        "Aesthetic information",
        "Opportunities for recreation and tourism",
        "Recreation",
        "Inspiration for culture, art and design",
        "Spiritual experience",
        "Information for cognitive development",
        "Existence, bequest values",
    ],
    "Food and Water": [
        "Food",
        "Water",
        "Pollination",
        "Maintenance of soil fertility",
        "Nursery service",
    ],
    "Health": [
        "Medicinal resources",
        "Air quality regulation",
        "Waste treatment",
        "Biological control",
        "Genetic resources",
    ],
    "Weather Protection": [
        "Climate regulation",
        "Moderation of extreme events",
        "Regulation of water flows",
        "Erosion prevention",
    ],
    "Economic and Energy": [
        "Raw materials",
        "Ornamental resources",
        "Energy",
        "Fuel wood",
    ],
}

OTHER_CATEGORY = "Other"

ALL_CATEGORIES = list(SERVICE_CATEGORIES) + [OTHER_CATEGORY]

# Label for records whose Biome cell is blank
UNKNOWN_BIOME = "Unknown"

# ============================================================================
# AGGREGATION & FIGURES
# ============================================================================

TOP_N_BIOMES = 5
FIGURE_DPI = 300
FIGURE_SIZE = (12, 7)
PALETTE = "Set2"

# ============================================================================
# LOGGING & VERBOSITY
# ============================================================================

VERBOSE = True

def print_config():
    """Print all configuration settings."""
    print("\n" + "=" * 80)
    print("PIPELINE CONFIGURATION")
    print("=" * 80)
    print(f"\n📁 PROJECT ROOT: {PROJECT_ROOT}")
    print(f"📄 INPUT FILE: {INPUT_FILE}")
    print(f"📂 PROCESSED DIR: {PROCESSED_DIR}")
    print(f"📂 OUTPUTS DIR: {OUTPUTS_DIR}")
    print(f"📂 FIGURES DIR: {FIGURES_DIR}")
    print(f"\n💱 Reference currency: {REFERENCE_CURRENCY} ({len(CURRENCY_FACTORS)} known currencies)")
    print(f"   Header row: {HEADER_ROW}, data starts at row: {DATA_START_ROW}")
    print(f"   Top biomes charted: {TOP_N_BIOMES}")
    print(f"\n✓ Configuration loaded successfully")
    print("=" * 80 + "\n")
