"""
I/O module: Load the valuation export and save result tables.
"""

import pandas as pd
from pathlib import Path

from . import config


def load_csv(filepath, **kwargs):
    """
    Load CSV file with error handling.

    Args:
        filepath: Path to CSV file
        **kwargs: Additional arguments for pd.read_csv()

    Returns:
        pd.DataFrame
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"CSV file not found: {filepath}")

    return pd.read_csv(filepath, **kwargs)


def load_valuations(filepath, header_row=config.HEADER_ROW, data_start=config.DATA_START_ROW):
    """
    Load the raw valuation export and rename columns to internal names.

    The header is not on the first line: lines before `header_row` and the
    metadata lines between the header and `data_start` are skipped. All
    fields are read as text; numeric parsing happens in cleaning.

    Args:
        filepath: Path to the export
        header_row: 0-based line number of the header
        data_start: 0-based line number of the first record

    Returns:
        pd.DataFrame with the columns of config.COLUMN_MAP (plus any extras)
    """
    if data_start <= header_row:
        raise ValueError(f"data_start ({data_start}) must come after header_row ({header_row})")

    def skip(i):
        return i < header_row or header_row < i < data_start

    df = load_csv(filepath, skiprows=skip, dtype=str, keep_default_na=True)
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in config.REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Required columns missing from {Path(filepath).name}: {missing}")

    return df.rename(columns=config.COLUMN_MAP)


def save_csv(df, filepath, **kwargs):
    """
    Save DataFrame to CSV.

    Args:
        df: DataFrame to save
        filepath: Output path
        **kwargs: Additional arguments for df.to_csv()

    Returns:
        Path to saved file
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    df.to_csv(filepath, index=False, **kwargs)

    return filepath
