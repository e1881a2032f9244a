#!/usr/bin/env python
"""
02_report.py
- Run the valuation pipeline end to end
- Save aggregate tables into outputs/tables/
- Save the two stacked bar charts into reports/figures/ (300 dpi)

Usage:
    python scripts/02_report.py [--input path/to/export.csv] [--top-n 5]
"""

import argparse
import sys
from pathlib import Path

# ensure repo root on path for `ecovalue` package imports when running as script
REPO_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(REPO_ROOT))

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from ecovalue import config
from ecovalue.io import save_csv
from ecovalue.pipeline import run_pipeline
from ecovalue.charts import render_chart
from ecovalue.qc import print_qc_report


def main():
    parser = argparse.ArgumentParser(description="Ecosystem-service valuation report.")
    parser.add_argument("--input", type=Path, default=config.INPUT_FILE, help="valuation export CSV")
    parser.add_argument("--top-n", type=int, default=config.TOP_N_BIOMES, help="biomes in the by-biome chart")
    args = parser.parse_args()

    config.print_config()

    if not args.input.exists():
        print(f"ERROR: input file not found: {args.input}", file=sys.stderr)
        sys.exit(1)

    # ========================================================================
    # 1. CLEAN & AGGREGATE
    # ========================================================================
    print("=" * 80)
    print("CLEANING & AGGREGATION")
    print("=" * 80)
    result = run_pipeline(args.input, top_n=args.top_n)

    print_qc_report(result.qc_checks())

    # ========================================================================
    # 2. TABLES
    # ========================================================================
    print("\n" + "=" * 80)
    print("SAVING TABLES")
    print("=" * 80)
    tables = {
        "valuations_clean": result.clean,
        "drop_summary": result.drop_summary(),
        "by_biome_top_by_service": result.by_biome,
        "by_service_by_biome": result.by_service,
    }
    for key, table in tables.items():
        out = save_csv(table, config.OUTPUT_FILES[key])
        print(f"✓ Saved: {out}")

    # ========================================================================
    # 3. FIGURES
    # ========================================================================
    print("\n" + "=" * 80)
    print("CREATING FIGURES")
    print("=" * 80)
    y_label = f"Value ({config.REFERENCE_CURRENCY}/ha/yr)"

    fig = render_chart(
        result.by_biome, 'biome', 'value_per_area', 'service_category',
        f"Top {args.top_n} Biomes by Ecosystem Service Value", y_label,
        out_path=config.OUTPUT_FILES["fig_by_biome"],
    )
    plt.close(fig)
    print(f"✓ Saved: {config.OUTPUT_FILES['fig_by_biome']}")

    fig = render_chart(
        result.by_service, 'service_category', 'value_per_area', 'biome',
        "Ecosystem Service Value by Service Category", y_label,
        out_path=config.OUTPUT_FILES["fig_by_service"],
    )
    plt.close(fig)
    print(f"✓ Saved: {config.OUTPUT_FILES['fig_by_service']}")

    print("\n" + "=" * 80)
    print("✓ REPORT COMPLETE")
    print("=" * 80)


if __name__ == "__main__":
    main()
