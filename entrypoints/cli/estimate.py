from __future__ import annotations

import json
from typing import Any, List, Optional

import typer

from leadcalc.adapters.weights_io import resolve_market_weights
from leadcalc.domain.weights import (
    COMMON_ROLES,
    COMPANY_SIZES,
    DATA_SOURCES,
    GEOGRAPHIC_FILTERS,
    INDUSTRIES,
)
from leadcalc.pipelines.batch import run_roi_batch
from leadcalc.services.estimator import estimate_roi, estimate_tam

app = typer.Typer(help="Market sizing (TAM) and outreach ROI calculators.")


def _echo(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2))


@app.command()
def catalog() -> None:
    """
    Print the known labels for every TAM selection.
    """
    _echo(
        {
            "industries": INDUSTRIES,
            "roles": COMMON_ROLES,
            "company_sizes": COMPANY_SIZES,
            "geographic_filters": GEOGRAPHIC_FILTERS,
            "data_sources": DATA_SOURCES,
        }
    )


@app.command()
def tam(
    industry: List[str] = typer.Option(..., "--industry", help="Industry label (repeatable)"),
    role: List[str] = typer.Option(..., "--role", help="Role label (repeatable)"),
    size: List[str] = typer.Option(..., "--size", help="Company size bucket (repeatable)"),
    source: Optional[str] = typer.Option(None, help="Data source, e.g. LinkedIn"),
    geo: List[str] = typer.Option([], "--geo", help="Region (only the first is used)"),
    multiplier: Optional[float] = typer.Option(None, help="Custom scaling factor"),
    weights: Optional[str] = typer.Option(
        None, help="JSON weights file (default: LEADCALC_WEIGHTS_PATH or built-in tables)"
    ),
) -> None:
    """
    Estimate the addressable market for a segment.
    """
    payload = {
        "industries": industry,
        "roles": role,
        "company_sizes": size,
        "geographic_filters": geo,
        "data_source": source,
        "custom_multiplier": multiplier,
    }
    try:
        report = estimate_tam(payload, weights=resolve_market_weights(weights))
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    _echo(report)


@app.command()
def roi(
    leads: float = typer.Option(10_000, help="Number of leads/contacts"),
    frequency: str = typer.Option("monthly", help="daily | weekly | monthly"),
    duration: float = typer.Option(3, help="Campaign duration in months"),
    open_rate: float = typer.Option(25, help="Open rate %"),
    reply_rate: float = typer.Option(5, help="Reply rate %"),
    meeting_booked_rate: float = typer.Option(30, help="Meeting booked rate %"),
    meeting_show_rate: float = typer.Option(80, help="Meeting show rate %"),
    deal_close_rate: float = typer.Option(20, help="Deal close rate %"),
    deal_value: float = typer.Option(10_000, help="Average deal value (ACV)"),
    contract_length: float = typer.Option(12, help="Contract length in months"),
    ltv: Optional[float] = typer.Option(None, help="Customer LTV override"),
    cost_per_lead: float = typer.Option(1, help="Cost per lead"),
    tool_costs: float = typer.Option(200, help="Tool costs per month"),
    time_costs: float = typer.Option(1_000, help="Time costs (total)"),
    other_expenses: float = typer.Option(500, help="Other expenses"),
) -> None:
    """
    Estimate funnel outcomes and ROI for an outreach campaign.
    """
    payload = {
        "leads": leads,
        "outreach_frequency": frequency,
        "campaign_duration": duration,
        "open_rate": open_rate,
        "reply_rate": reply_rate,
        "meeting_booked_rate": meeting_booked_rate,
        "meeting_show_rate": meeting_show_rate,
        "deal_close_rate": deal_close_rate,
        "average_deal_value": deal_value,
        "contract_length": contract_length,
        "customer_ltv": ltv,
        "cost_per_lead": cost_per_lead,
        "tool_costs": tool_costs,
        "time_costs": time_costs,
        "other_expenses": other_expenses,
    }
    try:
        report = estimate_roi(payload)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    _echo(report)


@app.command("roi-batch")
def roi_batch(
    csv_in: str = typer.Argument(..., help="CSV with one campaign scenario per row"),
    csv_out: str = typer.Argument(..., help="Where to write the scored scenarios"),
) -> None:
    """
    Score every scenario in a CSV (columns named like the `roi` options'
    underlying fields, e.g. leads, open_rate, tool_costs).
    """
    _echo(run_roi_batch(csv_in, csv_out))


if __name__ == "__main__":
    app()
