# src/leadcalc/analysis/charts.py
from __future__ import annotations

from typing import Any, Mapping

from leadcalc.domain.roi import FunnelBreakdown, ROIConfiguration
from leadcalc.domain.rounding import clamp_finite
from leadcalc.domain.tam import TAMResult


def display_name(label: str) -> str:
    """'Real_Estate' -> 'Real Estate'."""
    return label.replace("_", " ")


def breakdown_series(values: Mapping[str, float], *, prettify: bool = True) -> list[dict[str, Any]]:
    return [
        {"name": display_name(k) if prettify else k, "value": v}
        for k, v in values.items()
    ]


def tam_chart_data(result: TAMResult) -> dict[str, list[dict[str, Any]]]:
    """Bar/pie series for the three TAM breakdowns."""
    b = result.breakdown
    return {
        "industry": breakdown_series(b.by_industry),
        "role": breakdown_series(b.by_role),
        # size buckets like "1-10" are already display-ready
        "company_size": breakdown_series(b.by_company_size, prettify=False),
    }


def funnel_chart_data(leads: float, funnel: FunnelBreakdown) -> list[dict[str, Any]]:
    return [
        {"name": "Leads", "value": clamp_finite(leads)},
        {"name": "Opens", "value": funnel.opens},
        {"name": "Replies", "value": funnel.replies},
        {"name": "Meetings Booked", "value": funnel.meetings_booked},
        {"name": "Meetings Shown", "value": funnel.meetings_shown},
        {"name": "Deals Closed", "value": funnel.deals_closed},
    ]


def cost_chart_data(config: ROIConfiguration) -> list[dict[str, Any]]:
    """
    Cost components as entered. Sums to the unrounded total_costs unless a
    product overflows, in which case that bar is pinned at MAX_MAGNITUDE.
    """
    return [
        {"name": "Lead Costs", "value": clamp_finite(config.leads * config.cost_per_lead)},
        {"name": "Tool Costs", "value": clamp_finite(config.tool_costs * config.campaign_duration)},
        {"name": "Time Costs", "value": config.time_costs},
        {"name": "Other Expenses", "value": config.other_expenses},
    ]
