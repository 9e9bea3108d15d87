# src/leadcalc/analysis/roi_batch.py

from __future__ import annotations
from dataclasses import dataclass

import numpy as np
import pandas as pd

from leadcalc.domain.rounding import round_half_up_array
from leadcalc.services.validation import DEFAULT_ROI_FIELDS, ROI_NUMERIC_FIELDS, clean_number_text

REQUIRED_COLUMNS = ["leads"]

RESULT_COLUMNS = [
    "opens",
    "replies",
    "meetings_booked",
    "meetings_shown",
    "deals_closed",
    "total_revenue",
    "total_costs",
    "roi",
    "roi_multiple",
    "revenue_per_lead",
    "cost_per_acquisition",
    "break_even_leads",
]


@dataclass
class BatchROIResult:
    opens: np.ndarray
    replies: np.ndarray
    meetings_booked: np.ndarray
    meetings_shown: np.ndarray
    deals_closed: np.ndarray
    total_revenue: np.ndarray
    total_costs: np.ndarray
    roi: np.ndarray
    roi_multiple: np.ndarray
    revenue_per_lead: np.ndarray
    cost_per_acquisition: np.ndarray
    break_even_leads: np.ndarray    # NaN where break-even is unreachable


def _parse_numbers(series: pd.Series, name: str) -> np.ndarray:
    """
    Parse a column the way the form parses a field: "2,500" and "40%" are
    numbers, blank cells come back as NaN, anything else is an error.
    """
    cleaned = series.map(lambda v: (clean_number_text(v) or None) if isinstance(v, str) else v)
    values = pd.to_numeric(cleaned, errors="coerce").to_numpy(dtype=float)

    bad = (np.isnan(values) & cleaned.notna().to_numpy()) | np.isinf(values)
    if bad.any():
        raise ValueError(f"Non-numeric {name} in rows: {np.flatnonzero(bad).tolist()}")
    return values


def _column(df: pd.DataFrame, name: str) -> np.ndarray:
    if name not in df.columns:
        return np.full(len(df), DEFAULT_ROI_FIELDS[name], dtype=float)
    values = _parse_numbers(df[name], name)
    # blank cells behave like an omitted form field
    return np.where(np.isnan(values), DEFAULT_ROI_FIELDS[name], values)


def compute_roi_metrics_df(df: pd.DataFrame) -> BatchROIResult:
    """
    Vectorized ROI computation over a DataFrame of campaign scenarios.

    Expected columns on df:
      - leads (required)
      - any ROIConfiguration numeric field; missing ones use the form defaults
      - customer_ltv (optional; NaN/0 means derive from ACV)

    Row i of the result equals calculate_roi() on row i.
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")

    leads = _parse_numbers(df["leads"], "leads")
    if np.isnan(leads).any():
        raise ValueError(f"Missing leads in rows: {np.flatnonzero(np.isnan(leads)).tolist()}")

    c = {name: _column(df, name) for name in ROI_NUMERIC_FIELDS}

    # --- Funnel ---
    opens = leads * (c["open_rate"] / 100)
    replies = opens * (c["reply_rate"] / 100)
    meetings_booked = replies * (c["meeting_booked_rate"] / 100)
    meetings_shown = meetings_booked * (c["meeting_show_rate"] / 100)
    deals_closed = meetings_shown * (c["deal_close_rate"] / 100)

    # --- LTV / revenue ---
    derived_ltv = c["average_deal_value"] * (c["contract_length"] / 12)
    if "customer_ltv" in df.columns:
        override = _parse_numbers(df["customer_ltv"], "customer_ltv")
        use_override = ~np.isnan(override) & (override != 0)
        ltv = np.where(use_override, override, derived_ltv)
    else:
        ltv = derived_ltv
    total_revenue = deals_closed * ltv

    # --- Costs ---
    total_costs = (
        leads * c["cost_per_lead"]
        + c["tool_costs"] * c["campaign_duration"]
        + c["time_costs"]
        + c["other_expenses"]
    )

    # --- Ratios (guarded) ---
    n = len(df)
    roi = np.zeros(n, dtype=float)
    roi_multiple = np.zeros(n, dtype=float)
    mask_cost = total_costs > 0
    roi[mask_cost] = (total_revenue[mask_cost] - total_costs[mask_cost]) / total_costs[mask_cost] * 100
    roi_multiple[mask_cost] = total_revenue[mask_cost] / total_costs[mask_cost]

    revenue_per_lead = np.zeros(n, dtype=float)
    mask_leads = leads > 0
    revenue_per_lead[mask_leads] = total_revenue[mask_leads] / leads[mask_leads]

    cost_per_acquisition = np.zeros(n, dtype=float)
    mask_deals = deals_closed > 0
    cost_per_acquisition[mask_deals] = total_costs[mask_deals] / deals_closed[mask_deals]

    # --- Break-even ---
    conversion_rate = np.zeros(n, dtype=float)
    mask_nonzero_leads = leads != 0
    conversion_rate[mask_nonzero_leads] = deals_closed[mask_nonzero_leads] / leads[mask_nonzero_leads]
    per_lead = ltv * conversion_rate

    break_even = np.full(n, np.nan, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        leads_needed = np.where(per_lead != 0, total_costs / per_lead, np.nan)
    # overflowed totals stay unreachable, as in calculate_roi
    mask_reachable = (conversion_rate > 0) & np.isfinite(leads_needed)
    break_even[mask_reachable] = round_half_up_array(leads_needed[mask_reachable])

    return BatchROIResult(
        opens=round_half_up_array(opens),
        replies=round_half_up_array(replies),
        meetings_booked=round_half_up_array(meetings_booked),
        meetings_shown=round_half_up_array(meetings_shown),
        deals_closed=round_half_up_array(deals_closed),
        total_revenue=round_half_up_array(total_revenue),
        total_costs=round_half_up_array(total_costs),
        roi=round_half_up_array(roi, 2),
        roi_multiple=round_half_up_array(roi_multiple, 2),
        revenue_per_lead=round_half_up_array(revenue_per_lead, 2),
        cost_per_acquisition=round_half_up_array(cost_per_acquisition, 2),
        break_even_leads=break_even,
    )


def roi_results_frame(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy of df with one column per ROI result field appended."""
    res = compute_roi_metrics_df(df)
    out = df.copy()
    for name in RESULT_COLUMNS:
        out[name] = getattr(res, name)
    return out
