# src/leadcalc/domain/tam.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from leadcalc.domain.rounding import round_count
from leadcalc.domain.weights import DEFAULT_MARKET_WEIGHTS, MarketWeights


@dataclass(frozen=True)
class TAMConfiguration:
    industries: Tuple[str, ...]
    roles: Tuple[str, ...]
    company_sizes: Tuple[str, ...]
    geographic_filters: Tuple[str, ...] = ("US",)
    data_source: str = "LinkedIn"
    custom_multiplier: Optional[float] = None

    @property
    def primary_region(self) -> Optional[str]:
        # single-select for now; the sequence shape is kept for later multi-region work
        return self.geographic_filters[0] if self.geographic_filters else None


@dataclass(frozen=True)
class ConfidenceInterval:
    lower: int
    upper: int


@dataclass(frozen=True)
class TAMBreakdown:
    by_industry: Dict[str, int] = field(default_factory=dict)
    by_role: Dict[str, int] = field(default_factory=dict)
    by_company_size: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class TAMResult:
    base_market_size: int            # population before reachability adjustment
    estimated_reachable: int         # base scaled by data source fraction
    confidence_interval: ConfidenceInterval
    breakdown: TAMBreakdown


def calculate_tam(
    config: TAMConfiguration,
    weights: MarketWeights = DEFAULT_MARKET_WEIGHTS,
) -> TAMResult:
    """
    Estimate the addressable population for a set of segment selections.

    Industry and role selections overlap, so their intersection is
    approximated by the smaller of the two totals instead of the sum. The
    company size share and the custom multiplier scale that base, and the
    data source fraction turns it into a reachable head count.

    Never raises: unknown labels use the fallback weights, empty selections
    give a zero-sized market.
    """
    industry_total = sum(weights.industry_weight(i) for i in config.industries)
    role_total = sum(weights.role_weight(r) for r in config.roles)
    company_size_total = sum(weights.company_size_fraction(s) for s in config.company_sizes)

    base_market_size = (
        min(industry_total, role_total)
        * (company_size_total or 1)
        * (config.custom_multiplier or 1)
    )

    data_source_multiplier = weights.data_source_fraction(config.data_source)
    estimated_reachable = base_market_size * data_source_multiplier

    lower = estimated_reachable * weights.confidence_lower
    upper = estimated_reachable * weights.confidence_upper

    # line items use raw weights, so adding a selection never dilutes the others
    by_industry = {
        i: round_count(weights.industry_weight(i) * data_source_multiplier)
        for i in config.industries
    }
    by_role = {
        r: round_count(weights.role_weight(r) * data_source_multiplier)
        for r in config.roles
    }
    by_company_size = {
        s: round_count(base_market_size * weights.company_size_fraction(s))
        for s in config.company_sizes
    }

    return TAMResult(
        base_market_size=round_count(base_market_size),
        estimated_reachable=round_count(estimated_reachable),
        confidence_interval=ConfidenceInterval(
            lower=round_count(lower),
            upper=round_count(upper),
        ),
        breakdown=TAMBreakdown(
            by_industry=by_industry,
            by_role=by_role,
            by_company_size=by_company_size,
        ),
    )
