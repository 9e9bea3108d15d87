# src/leadcalc/pipelines/batch.py

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import pandas as pd
from loguru import logger

from leadcalc.adapters.config import config
from leadcalc.analysis.roi_batch import roi_results_frame


def run_roi_batch(csv_in: Path | str, csv_out: Path | str) -> Dict[str, Any]:
    """
    Evaluate every campaign scenario in `csv_in` and write `csv_out`.

    One row per scenario, one column per ROI input (only `leads` is
    required). The output keeps the input columns and appends the result
    columns; `break_even_leads` is empty where break-even is unreachable.

    Returns a small summary dict (row count, best/worst ROI, output path).
    """
    csv_in = Path(csv_in)
    csv_out = Path(csv_out)

    if not csv_in.exists():
        raise FileNotFoundError(f"{csv_in} not found.")

    df = pd.read_csv(csv_in)
    if len(df) > config.BATCH_MAX_ROWS:
        raise ValueError(
            f"{csv_in} has {len(df)} rows; the limit is {config.BATCH_MAX_ROWS} "
            "(set LEADCALC_BATCH_MAX_ROWS to raise it)"
        )

    logger.info("Evaluating ROI scenarios", csv_in=str(csv_in), rows=len(df))

    out = roi_results_frame(df)

    csv_out.parent.mkdir(parents=True, exist_ok=True)
    out.to_csv(csv_out, index=False)

    unreachable = int(out["break_even_leads"].isna().sum())
    summary: Dict[str, Any] = {
        "rows": int(len(out)),
        "output": str(csv_out),
        "unreachable_break_even": unreachable,
        "best_roi": float(out["roi"].max()) if len(out) else None,
        "worst_roi": float(out["roi"].min()) if len(out) else None,
    }

    logger.info("ROI batch completed", **summary)
    return summary
