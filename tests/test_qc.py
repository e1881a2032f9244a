import numpy as np
import pandas as pd
import pytest

from ecovalue import qc


def test_check_no_missing_per_area():
    assert qc.check_no_missing_per_area(pd.DataFrame({'value_per_area': [1.0, -2.0]})).startswith("✓")
    with pytest.raises(AssertionError):
        qc.check_no_missing_per_area(pd.DataFrame({'value_per_area': [1.0, np.nan]}))
    with pytest.raises(AssertionError):
        qc.check_no_missing_per_area(pd.DataFrame({'value_per_area': [np.inf]}))


def test_check_annual_only():
    with pytest.raises(AssertionError, match="One-time"):
        qc.check_annual_only(pd.DataFrame({'value_type': ["Annual", "One-time"]}))


def test_check_categories_valid():
    assert qc.check_categories_valid(pd.DataFrame({'service_category': ["Health", "Other"]})).startswith("✓")
    with pytest.raises(AssertionError, match="Wellbeing"):
        qc.check_categories_valid(pd.DataFrame({'service_category': ["Wellbeing"]}))


def test_check_aggregate_totals():
    clean = pd.DataFrame({'value_per_area': [1.0, 2.0]})
    with pytest.raises(AssertionError):
        qc.check_aggregate_totals(clean, pd.DataFrame({'value_per_area': [1.0]}))


def test_print_qc_report_reports_failures(capsys):
    bad = pd.DataFrame({'value_per_area': [np.nan]})
    qc.print_qc_report([("Per-area values defined", qc.check_no_missing_per_area, {'df': bad})])
    out = capsys.readouterr().out
    assert "❌ Per-area values defined" in out
    assert "QUALITY CONTROL REPORT" in out
