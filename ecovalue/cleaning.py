"""
Cleaning module: currency conversion and per-area ("hectarized") annual values.
"""

import pandas as pd
import numpy as np
import re
from . import config
from .classify import add_service_category

_AREA_RE = re.compile(config.AREA_UNIT_PATTERN, re.IGNORECASE)
_PER_CAPITA_RE = re.compile(config.PER_CAPITA_UNIT_PATTERN, re.IGNORECASE)

# Drop reasons, in the order they are reported
REASON_NOT_ANNUAL = "value type not annual"
REASON_PER_CAPITA = "per-person or per-household unit"
REASON_BAD_VALUE = "value missing or not numeric"
REASON_UNKNOWN_CURRENCY = "unknown currency"
REASON_NO_AREA = "service area missing or not numeric"
REASON_ZERO_AREA = "service area is zero"

DROP_REASONS = [
    REASON_NOT_ANNUAL,
    REASON_PER_CAPITA,
    REASON_BAD_VALUE,
    REASON_UNKNOWN_CURRENCY,
    REASON_NO_AREA,
    REASON_ZERO_AREA,
]


def parse_numeric_series(s: pd.Series) -> pd.Series:
    """
    Parse numeric text (values, service areas), NaN for anything unparseable.

    Handles both 1,234.56 (comma thousands sep) and 1.234,56 (comma decimal sep).
    Decision: use the LAST separator (comma or dot) as decimal point, unless there
    is no dot and every comma group has exactly three digits, in which case the
    commas are thousands separators (e.g. '12,500', '1,000,000').

    Args:
        s: pd.Series of numeric strings (e.g., '1,250.5', '€100,50', '3e4')

    Returns:
        pd.Series of float values (NaN for unparseable)
    """
    def parse_single(val):
        if val is None or pd.isna(val):
            return np.nan
        if isinstance(val, (int, float, np.number)):
            return float(val)

        val_str = str(val).strip()

        # Remove currency symbols, spaces, NBSP
        val_str = re.sub(r'[$€£¥\s\xa0]', '', val_str)

        if not val_str:
            return np.nan

        # Plain and scientific notation pass straight through
        try:
            parsed = float(val_str)
            return parsed if np.isfinite(parsed) else np.nan
        except ValueError:
            pass

        if re.search(r'[^\d.,\-]', val_str) or val_str == '-':
            return np.nan

        last_comma_idx = val_str.rfind(',')
        last_dot_idx = val_str.rfind('.')

        if last_comma_idx > last_dot_idx:
            if last_dot_idx == -1 and re.fullmatch(r'-?\d{1,3}(,\d{3})+', val_str):
                val_str = val_str.replace(',', '')
            else:
                # Comma is decimal sep
                val_str = val_str.replace('.', '').replace(',', '.')
        elif last_dot_idx > last_comma_idx:
            # Dot is decimal sep, commas are thousands separators
            val_str = val_str.replace(',', '')

        try:
            return float(val_str)
        except ValueError:
            return np.nan

    return s.apply(parse_single).astype(float)


def conversion_factor(currency):
    """Factor into the reference currency, NaN for unknown currencies."""
    if not isinstance(currency, str):
        return np.nan
    return config.CURRENCY_FACTORS.get(currency.strip(), np.nan)


def convert_currency(df: pd.DataFrame) -> pd.DataFrame:
    """Add `value_converted` = value x factor(currency)."""
    df = df.copy()
    factors = df['currency'].map(conversion_factor).astype(float)
    df['value_converted'] = df['value'].astype(float) * factors
    return df


def is_area_unit(unit) -> bool:
    """True when the unit string is already expressed per unit area."""
    if not isinstance(unit, str):
        return False
    return _AREA_RE.search(unit) is not None


def is_per_capita_unit(unit) -> bool:
    """True when the unit string is per person or per household."""
    if not isinstance(unit, str):
        return False
    return _PER_CAPITA_RE.search(unit) is not None


def per_area_value(unit, service_area, value) -> float:
    """
    Annual value per unit area for a single record.

    Area-based units pass through unchanged; anything else is divided by the
    service area. Missing, zero or non-numeric inputs give NaN, never an error.
    """
    try:
        value = float(value)
    except (TypeError, ValueError):
        return np.nan
    if np.isnan(value):
        return np.nan

    if is_area_unit(unit):
        return value

    try:
        area = float(service_area)
    except (TypeError, ValueError):
        return np.nan
    if np.isnan(area) or area == 0:
        return np.nan
    return value / area


def filter_annual(df: pd.DataFrame):
    """Keep annual value types. Returns (df, n_dropped)."""
    mask = df['value_type'].str.strip().isin(config.ANNUAL_VALUE_TYPES)
    return df[mask].copy(), int((~mask).sum())


def filter_basis(df: pd.DataFrame):
    """
    Drop per-person / per-household units. Returns (df, n_dropped).

    Non-area units with a missing service area are kept here; they cannot be
    hectarized and are removed by drop_missing().
    """
    mask = ~df['unit'].map(is_per_capita_unit).astype(bool)
    return df[mask].copy(), int((~mask).sum())


def hectarize(df: pd.DataFrame) -> pd.DataFrame:
    """Add `value_per_area` from unit, service area and converted value."""
    df = df.copy()
    df['value_per_area'] = [
        per_area_value(unit, area, value)
        for unit, area, value in zip(df['unit'], df['service_area'], df['value_converted'])
    ]
    df['value_per_area'] = df['value_per_area'].astype(float)
    return df


def missing_reasons(df: pd.DataFrame) -> pd.Series:
    """Reason each row with a missing `value_per_area` cannot be used."""
    area_unit = df['unit'].map(is_area_unit).astype(bool)
    conditions = [
        df['value'].isna(),
        df['value_converted'].isna(),
        ~area_unit & df['service_area'].isna(),
        ~area_unit & (df['service_area'] == 0),
    ]
    choices = [REASON_BAD_VALUE, REASON_UNKNOWN_CURRENCY, REASON_NO_AREA, REASON_ZERO_AREA]
    reasons = np.select(conditions, choices, default=REASON_NO_AREA)
    return pd.Series(reasons, index=df.index)


def drop_missing(df: pd.DataFrame):
    """Drop rows without a usable `value_per_area`. Returns (df, reason counts)."""
    missing = df['value_per_area'].isna()
    reasons = missing_reasons(df[missing])
    counts = reasons.value_counts().to_dict()
    return df[~missing].copy(), {k: int(v) for k, v in counts.items()}


def clean_valuations(df_raw):
    """
    Clean valuations: parse numerics, convert currency, hectarize, classify.

    Args:
        df_raw: Raw valuations DataFrame with internal column names

    Returns:
        (cleaned DataFrame, log lines, {drop reason: row count})
    """
    log = []
    drops = {reason: 0 for reason in DROP_REASONS}
    df_clean = df_raw.copy()

    # 1. Trim label columns
    for col in ['biome', 'es_service', 'currency', 'value_type', 'unit']:
        df_clean[col] = df_clean[col].where(df_clean[col].isna(), df_clean[col].astype(str).str.strip())
    missing_biome = df_clean['biome'].isna() | (df_clean['biome'] == '')
    if missing_biome.any():
        df_clean.loc[missing_biome, 'biome'] = config.UNKNOWN_BIOME
        log.append(f"⚠️  {int(missing_biome.sum())} records without a biome labelled '{config.UNKNOWN_BIOME}'")
    log.append(f"✓ Loaded {len(df_clean):,} valuation records")

    # 2. Parse numeric columns
    for col in ['value', 'service_area']:
        raw_present = df_clean[col].notna().sum()
        df_clean[col] = parse_numeric_series(df_clean[col])
        unparsed = int(raw_present - df_clean[col].notna().sum())
        if unparsed > 0:
            log.append(f"⚠️  {col}: {unparsed} non-numeric values set to NaN")
    log.append(f"✓ Numeric columns parsed (value, service_area)")

    # 3. Currency conversion
    df_clean = convert_currency(df_clean)
    unknown = df_clean['currency'].notna() & df_clean['currency'].map(conversion_factor).isna()
    if unknown.any():
        names = sorted(df_clean.loc[unknown, 'currency'].unique())
        log.append(f"⚠️  {int(unknown.sum())} records in unknown currencies: {names}")
    log.append(f"✓ Values converted to {config.REFERENCE_CURRENCY}")

    # 4. Annual value types only
    df_clean, dropped = filter_annual(df_clean)
    drops[REASON_NOT_ANNUAL] = dropped
    if dropped > 0:
        log.append(f"⚠️  Removed {dropped} records: {REASON_NOT_ANNUAL}")

    # 5. Per-person / per-household units cannot be expressed per area
    df_clean, dropped = filter_basis(df_clean)
    drops[REASON_PER_CAPITA] = dropped
    if dropped > 0:
        log.append(f"⚠️  Removed {dropped} records: {REASON_PER_CAPITA}")

    # 6. Value per unit area
    df_clean = hectarize(df_clean)
    log.append(f"✓ value_per_area computed ({config.REFERENCE_CURRENCY}/ha/yr)")

    # 7. Purge rows without a usable value
    df_clean, missing_counts = drop_missing(df_clean)
    for reason, count in missing_counts.items():
        drops[reason] += count
        log.append(f"⚠️  Removed {count} records: {reason}")

    # 8. Generalized service category
    df_clean = add_service_category(df_clean)
    log.append(f"✓ Services classified into {df_clean['service_category'].nunique()} categories")

    log.append(f"✓ Valuation cleaning complete: {df_raw.shape} → {df_clean.shape}")

    return df_clean, log, drops
