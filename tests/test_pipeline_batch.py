import pandas as pd
import pytest

from leadcalc.pipelines import batch
from leadcalc.pipelines.batch import run_roi_batch


def test_run_roi_batch_writes_scored_csv(tmp_path):
    csv_in = tmp_path / "scenarios.csv"
    csv_out = tmp_path / "out" / "scored.csv"
    pd.DataFrame(
        [
            {"name": "baseline", "leads": 10_000},
            {"name": "dead", "leads": 10_000, "deal_close_rate": 0},
        ]
    ).to_csv(csv_in, index=False)

    summary = run_roi_batch(csv_in, csv_out)

    assert summary["rows"] == 2
    assert summary["unreachable_break_even"] == 1
    assert summary["best_roi"] == pytest.approx(395.87)
    assert summary["worst_roi"] == pytest.approx(-100.0)

    out = pd.read_csv(csv_out)
    assert list(out["name"]) == ["baseline", "dead"]
    assert out.loc[0, "break_even_leads"] == 2017
    assert pd.isna(out.loc[1, "break_even_leads"])


def test_run_roi_batch_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        run_roi_batch(tmp_path / "missing.csv", tmp_path / "out.csv")


def test_run_roi_batch_row_limit(tmp_path, monkeypatch):
    csv_in = tmp_path / "big.csv"
    pd.DataFrame({"leads": [100, 200, 300]}).to_csv(csv_in, index=False)
    monkeypatch.setattr(batch.config, "BATCH_MAX_ROWS", 2)

    with pytest.raises(ValueError, match="limit is 2"):
        run_roi_batch(csv_in, tmp_path / "out.csv")


def test_run_roi_batch_refuses_unreadable_cells(tmp_path):
    csv_in = tmp_path / "typo.csv"
    csv_out = tmp_path / "out.csv"
    csv_in.write_text('leads,open_rate\n"2,500",40%\n1000,fifty\n')

    with pytest.raises(ValueError, match=r"Non-numeric open_rate in rows: \[1\]"):
        run_roi_batch(csv_in, csv_out)
    assert not csv_out.exists()
