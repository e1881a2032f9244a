"""
Pipeline module: read export → clean → aggregate, as a single pure call.
"""

from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd

from . import config
from . import qc
from .io import load_valuations
from .cleaning import clean_valuations
from .aggregate import by_biome_top_n_by_service, by_service_by_biome


@dataclass
class PipelineResult:
    raw: pd.DataFrame
    clean: pd.DataFrame
    by_biome: pd.DataFrame
    by_service: pd.DataFrame
    drop_counts: dict = field(default_factory=dict)
    log: list = field(default_factory=list)

    def drop_summary(self) -> pd.DataFrame:
        """Drop counts as a table, including reasons that dropped nothing."""
        return pd.DataFrame(
            {'reason': list(self.drop_counts), 'records_dropped': list(self.drop_counts.values())}
        )

    def qc_checks(self):
        """(name, check_func, kwargs) tuples for qc.print_qc_report."""
        return [
            ("Per-area values defined", qc.check_no_missing_per_area, {'df': self.clean}),
            ("Annual value types only", qc.check_annual_only, {'df': self.clean}),
            ("Service categories valid", qc.check_categories_valid, {'df': self.clean}),
            ("By-service totals", qc.check_aggregate_totals,
             {'df_clean': self.clean, 'df_by_service': self.by_service}),
        ]


def run_pipeline(input_path, header_row=config.HEADER_ROW, data_start=config.DATA_START_ROW,
                 top_n=config.TOP_N_BIOMES, verbose=None):
    """
    Run the full valuation pipeline on one export file.

    Args:
        input_path: Path to the valuation export
        header_row: 0-based line number of the header
        data_start: 0-based line number of the first record
        top_n: number of biomes in the by-biome view
        verbose: print the cleaning log (defaults to config.VERBOSE)

    Returns:
        PipelineResult
    """
    if verbose is None:
        verbose = config.VERBOSE

    df_raw = load_valuations(Path(input_path), header_row=header_row, data_start=data_start)
    df_clean, log, drops = clean_valuations(df_raw)

    by_biome = by_biome_top_n_by_service(df_clean, n=top_n)
    by_service = by_service_by_biome(df_clean)
    log.append(f"✓ Aggregated: {by_biome['biome'].nunique()} top biomes, "
               f"{by_service['service_category'].nunique()} service categories")

    if verbose:
        for line in log:
            print(f"  {line}")

    return PipelineResult(
        raw=df_raw,
        clean=df_clean,
        by_biome=by_biome,
        by_service=by_service,
        drop_counts=drops,
        log=log,
    )
