# src/leadcalc/api/schemas.py
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel
from pydantic import ConfigDict

# Numbers arrive from form fields, so "25", "25%" and 25 are all accepted;
# services.validation does the coercion.
FormNumber = float | str


# --------------------------------------------
# TAM
# --------------------------------------------

class TAMRequest(BaseModel):
    """
    Request for /tam.

    Selections may hold custom labels; they are estimated with fallback
    weights rather than rejected.
    """
    model_config = ConfigDict(extra="allow")

    industries: list[str] = []
    roles: list[str] = []
    company_sizes: list[str] = []
    geographic_filters: list[str] = []
    data_source: str | None = None
    custom_multiplier: FormNumber | None = None


class ConfidenceIntervalOut(BaseModel):
    lower: int
    upper: int


class ChartPoint(BaseModel):
    name: str
    value: float


class TAMResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    base_market_size: int
    estimated_reachable: int
    confidence_interval: ConfidenceIntervalOut
    breakdown: dict[str, dict[str, int]]

    region: str | None = None
    data_source: str
    charts: dict[str, list[ChartPoint]] = {}


# --------------------------------------------
# ROI
# --------------------------------------------

Frequency = Literal["daily", "weekly", "monthly"]


class ROIRequest(BaseModel):
    """
    Request for /roi. Only `leads` is required; everything else defaults to
    the calculator form's starting values.
    """
    model_config = ConfigDict(extra="allow")

    leads: FormNumber | None = None
    # free text; trimmed, lowercased and checked by the service
    outreach_frequency: str | None = None
    campaign_duration: FormNumber | None = None

    open_rate: FormNumber | None = None
    reply_rate: FormNumber | None = None
    meeting_booked_rate: FormNumber | None = None
    meeting_show_rate: FormNumber | None = None
    deal_close_rate: FormNumber | None = None

    average_deal_value: FormNumber | None = None
    contract_length: FormNumber | None = None
    customer_ltv: FormNumber | None = None

    cost_per_lead: FormNumber | None = None
    tool_costs: FormNumber | None = None
    time_costs: FormNumber | None = None
    other_expenses: FormNumber | None = None


class BreakEvenOut(BaseModel):
    reachable: bool
    leads: int | None = None


class FunnelOut(BaseModel):
    opens: int
    replies: int
    meetings_booked: int
    meetings_shown: int
    deals_closed: int


class ROIResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    total_revenue: int
    total_costs: int
    roi: float
    roi_multiple: float
    revenue_per_lead: float
    cost_per_acquisition: float
    break_even_leads: BreakEvenOut
    funnel_breakdown: FunnelOut

    ltv: float
    outreach_frequency: Frequency
    touches_per_month: int
    charts: dict[str, list[ChartPoint]] = {}


# --------------------------------------------
# Catalog
# --------------------------------------------

class CatalogResponse(BaseModel):
    industries: list[str]
    roles: list[str]
    company_sizes: list[str]
    geographic_filters: list[str]
    data_sources: list[str]
    weights: dict[str, Any]
