"""
Quality Control (QC) module: Assertions over the clean valuations and aggregates.
"""

import numpy as np

from . import config


def check_no_missing_per_area(df, col='value_per_area'):
    """Assert every clean record has a finite per-area value."""
    assert df[col].notna().all(), f"Missing {col} values found!"
    assert np.isfinite(df[col]).all(), f"Non-finite {col} values found!"
    return f"✓ {col} defined for all {len(df):,} records"


def check_annual_only(df, col='value_type'):
    """Assert only annual value types survived."""
    bad = ~df[col].isin(config.ANNUAL_VALUE_TYPES)
    assert bad.sum() == 0, f"Non-annual value types found: {sorted(df.loc[bad, col].unique())}"
    return f"✓ Only annual value types ({df[col].nunique()} variants present)"


def check_categories_valid(df, col='service_category'):
    """Assert each record carries exactly one known category."""
    assert df[col].notna().all(), f"Null {col} values found!"
    unknown = set(df[col]) - set(config.ALL_CATEGORIES)
    assert not unknown, f"Unknown categories: {sorted(unknown)}"
    return f"✓ {df[col].nunique()} service categories in use"


def check_aggregate_totals(df_clean, df_by_service, col='value_per_area'):
    """Assert the by-service table accounts for every clean record."""
    expected = df_clean[col].sum()
    actual = df_by_service[col].sum()
    assert np.isclose(expected, actual), f"Total mismatch: {expected} clean != {actual} aggregated"
    return f"✓ Aggregate total matches clean total ({expected:,.2f} {config.REFERENCE_CURRENCY}/ha/yr)"


def print_qc_report(checks):
    """
    Print formatted QC report.

    Args:
        checks: List of (name, check_func, kwargs) tuples
    """
    print("\n" + "=" * 80)
    print("QUALITY CONTROL REPORT")
    print("=" * 80)

    for name, check_func, kwargs in checks:
        try:
            result = check_func(**kwargs)
            print(f"\n{name}")
            print(f"  {result}")
        except AssertionError as e:
            print(f"\n❌ {name}")
            print(f"  ERROR: {e}")
        except Exception as e:
            print(f"\n⚠️  {name}")
            print(f"  WARNING: {e}")

    print("\n" + "=" * 80)
