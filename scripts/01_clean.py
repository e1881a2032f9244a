#!/usr/bin/env python
"""
01_clean.py
- Load the raw valuation export (header at a fixed offset)
- Convert currencies, keep annual per-area records, classify services
- Save the clean table into data/processed/

Usage:
    python scripts/01_clean.py [--input path/to/export.csv]
"""

import argparse
import sys
from pathlib import Path

# ensure repo root on path for `ecovalue` package imports when running as script
REPO_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(REPO_ROOT))

from ecovalue import config
from ecovalue.io import load_valuations, save_csv
from ecovalue.cleaning import clean_valuations


def main():
    parser = argparse.ArgumentParser(description="Clean the ecosystem-service valuation export.")
    parser.add_argument("--input", type=Path, default=config.INPUT_FILE, help="valuation export CSV")
    parser.add_argument("--output", type=Path, default=config.OUTPUT_FILES["valuations_clean"])
    args = parser.parse_args()

    print("=" * 80)
    print("VALUATION CLEANING")
    print("=" * 80)

    if not args.input.exists():
        print(f"ERROR: input file not found: {args.input}", file=sys.stderr)
        sys.exit(1)

    df_raw = load_valuations(args.input)
    df_clean, log, drops = clean_valuations(df_raw)

    for line in log:
        print(f"  {line}")

    print(f"\nDropped records by reason:")
    for reason, count in drops.items():
        print(f"  {reason:40s}: {count:,}")

    out = save_csv(df_clean, args.output)
    print(f"\n✓ Saved: {out} ({len(df_clean):,} rows)")


if __name__ == "__main__":
    main()
