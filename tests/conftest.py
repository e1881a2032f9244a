import matplotlib
matplotlib.use("Agg")
import numpy as np
import pandas as pd
import pytest

RAW_COLUMNS = ["Biome", "ESService", "Currency", "Value", "ValueType", "Unit", "ServiceArea"]

# One record per outcome: three survive, six are dropped for different reasons
RAW_RECORDS = [
    ("Grassland", "Pollination", "Euro", "100", "Annual", "USD/ha/yr", None),
    ("Coastal", "Recreation", "US Dollar", "5000", "Annual", "USD/yr", "50"),
    ("Coastal", "Food", "Martian Credit", "10", "Annual", "USD/ha/yr", None),
    ("Forest", "Raw materials", "US Dollar", "20", "One-time", "USD/ha/yr", None),
    ("Wetland", "Water", "British Pound", "30", "Annualized NPV", "USD/person/yr", None),
    ("Wetland", "Climate regulation", "US Dollar", "400", "Annual (Range)", "USD/yr", None),
    ("Forest", "Erosion prevention", "US Dollar", "n.a.", "Annual", "USD/ha/yr", None),
    ("Forest", "Medicinal resources", "US Dollar", "80", "Annual", "USD/yr", "0"),
    ("Forest", "Maintenance of life cycles", "US Dollar", "60", "Annual", "USD/ha/yr", None),
]


@pytest.fixture
def raw_export_df():
    """Records as they appear in the export (raw column names, text values)."""
    return pd.DataFrame(RAW_RECORDS, columns=RAW_COLUMNS)


@pytest.fixture
def raw_valuations(raw_export_df):
    """Records after load_valuations() renaming."""
    from ecovalue import config
    return raw_export_df.rename(columns=config.COLUMN_MAP)


@pytest.fixture
def write_export(tmp_path):
    """Write records as an export file: title line, header, two metadata lines, data."""
    def _write(df, name="esvd.csv"):
        header, body = df.to_csv(index=False).split("\n", 1)
        n_sep = len(df.columns) - 1
        lines = [
            "Ecosystem Services Valuation Database export" + "," * n_sep,
            header,
            "Biome of the study site" + "," * n_sep,
            ",".join(["text"] * len(df.columns)),
        ]
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n" + body, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def clean_frame():
    """Minimal clean table for aggregation tests."""
    return pd.DataFrame({
        'biome': ["A", "B", "A", "C", "B", "D", "E", "F"],
        'service_category': ["Health", "Other", "Food and Water", "Health",
                             "Health", "Other", "Weather Protection", "Other"],
        'value_per_area': np.array([60, 90, 40, 80, 0, 70, 60, 50], dtype=float),
    })
