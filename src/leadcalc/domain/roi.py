# src/leadcalc/domain/roi.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal, Optional

from leadcalc.domain.rounding import round_count, round_ratio

OutreachFrequency = Literal["daily", "weekly", "monthly"]

# touches per month; descriptive only, not part of any cost total
FREQUENCY_MULTIPLIERS: dict[str, int] = {
    "daily": 30,
    "weekly": 4,
    "monthly": 1,
}


def frequency_multiplier(frequency: str) -> int:
    return FREQUENCY_MULTIPLIERS.get(frequency, 1)


@dataclass(frozen=True)
class ROIConfiguration:
    leads: float
    outreach_frequency: OutreachFrequency = "monthly"
    campaign_duration: float = 3            # months
    open_rate: float = 25                   # percentages, 0-100 (not clamped)
    reply_rate: float = 5
    meeting_booked_rate: float = 30
    meeting_show_rate: float = 80
    deal_close_rate: float = 20
    average_deal_value: float = 10_000      # ACV
    contract_length: float = 12             # months
    customer_ltv: Optional[float] = None    # overrides ACV * contract years
    cost_per_lead: float = 1
    tool_costs: float = 200                 # monthly
    time_costs: float = 1_000               # total
    other_expenses: float = 500

    def lifetime_value(self) -> float:
        if self.customer_ltv:
            return self.customer_ltv
        return self.average_deal_value * (self.contract_length / 12)


@dataclass(frozen=True)
class FunnelBreakdown:
    opens: int
    replies: int
    meetings_booked: int
    meetings_shown: int
    deals_closed: int


@dataclass(frozen=True)
class BreakEven:
    """
    Leads needed to cover total costs, or unreachable when no deal ever closes.

    Kept as a tagged value instead of float('inf') so it survives JSON.
    """
    reachable: bool
    leads: Optional[int] = None

    @classmethod
    def finite(cls, leads: float) -> "BreakEven":
        return cls(reachable=True, leads=round_count(leads))

    @classmethod
    def unreachable(cls) -> "BreakEven":
        return cls(reachable=False, leads=None)

    def as_float(self) -> float:
        return float(self.leads) if self.reachable else float("inf")


@dataclass(frozen=True)
class ROIResult:
    total_revenue: int
    total_costs: int
    roi: float                  # percent
    roi_multiple: float
    revenue_per_lead: float
    cost_per_acquisition: float
    break_even_leads: BreakEven
    funnel_breakdown: FunnelBreakdown


def calculate_roi(config: ROIConfiguration) -> ROIResult:
    """
    Run a lead volume through the outreach funnel and price the outcome.

    Every stage is a percentage of the one before it. Zero denominators
    resolve to 0 (or an unreachable break-even) so the result is always
    displayable.
    """
    # Funnel
    opens = config.leads * (config.open_rate / 100)
    replies = opens * (config.reply_rate / 100)
    meetings_booked = replies * (config.meeting_booked_rate / 100)
    meetings_shown = meetings_booked * (config.meeting_show_rate / 100)
    deals_closed = meetings_shown * (config.deal_close_rate / 100)

    # Revenue
    ltv = config.lifetime_value()
    total_revenue = deals_closed * ltv

    # Costs (outreach frequency intentionally left out)
    total_tool_costs = config.tool_costs * config.campaign_duration
    total_costs = (
        config.leads * config.cost_per_lead
        + total_tool_costs
        + config.time_costs
        + config.other_expenses
    )

    roi = (total_revenue - total_costs) / total_costs * 100 if total_costs > 0 else 0.0
    roi_multiple = total_revenue / total_costs if total_costs > 0 else 0.0
    revenue_per_lead = total_revenue / config.leads if config.leads > 0 else 0.0
    cost_per_acquisition = total_costs / deals_closed if deals_closed > 0 else 0.0

    # Break-even
    conversion_rate = deals_closed / config.leads if config.leads else 0.0
    revenue_per_converted_lead = ltv * conversion_rate
    break_even = BreakEven.unreachable()
    if conversion_rate > 0 and revenue_per_converted_lead != 0:
        leads_needed = total_costs / revenue_per_converted_lead
        # overflowed totals cannot be broken even on either
        if math.isfinite(leads_needed):
            break_even = BreakEven.finite(leads_needed)

    return ROIResult(
        total_revenue=round_count(total_revenue),
        total_costs=round_count(total_costs),
        roi=round_ratio(roi),
        roi_multiple=round_ratio(roi_multiple),
        revenue_per_lead=round_ratio(revenue_per_lead),
        cost_per_acquisition=round_ratio(cost_per_acquisition),
        break_even_leads=break_even,
        funnel_breakdown=FunnelBreakdown(
            opens=round_count(opens),
            replies=round_count(replies),
            meetings_booked=round_count(meetings_booked),
            meetings_shown=round_count(meetings_shown),
            deals_closed=round_count(deals_closed),
        ),
    )
