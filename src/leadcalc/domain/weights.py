# src/leadcalc/domain/weights.py
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

# --------------------------------------------
# Label catalogs (options offered by the UI)
# --------------------------------------------

INDUSTRIES = [
    "Technology",
    "Healthcare",
    "Finance",
    "Manufacturing",
    "Retail",
    "Education",
    "Real_Estate",
    "Consulting",
    "Marketing",
    "Sales",
]

COMMON_ROLES = [
    "CEO",
    "CTO",
    "VP_Sales",
    "Marketing_Director",
    "Sales_Director",
    "CFO",
    "COO",
    "CMO",
    "VP_Marketing",
    "VP_Engineering",
]

COMPANY_SIZES = ["1-10", "11-50", "51-200", "201-1000", "1000+"]

GEOGRAPHIC_FILTERS = ["US", "Global", "Europe", "Asia", "Other"]

DATA_SOURCES = ["LinkedIn", "Industry_databases", "Public_records", "Custom"]


class MarketWeights(BaseModel):
    """
    Per-category weight tables used by the TAM estimator.

    Industry/role weights are head counts of LinkedIn-reachable decision
    makers (global, ~420-450M in total). Company size and data source values
    are fractions.
    """
    # frozen only guards attribute assignment; the tables are wrapped read-only below
    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    industries: Mapping[str, float] = Field(
        default_factory=lambda: {
            "Technology": 18_000_000,     # software, IT services, SaaS, infra
            "Healthcare": 14_000_000,     # excludes frontline-only workers
            "Finance": 11_000_000,        # banking, fintech, insurance, accounting
            "Manufacturing": 16_000_000,
            "Retail": 13_000_000,         # corporate + ops, not store clerks
            "Education": 9_000_000,
            "Real_Estate": 7_000_000,
            "Consulting": 6_000_000,
            "Marketing": 9_000_000,
            "Sales": 15_000_000,          # SDRs through VPs
        }
    )
    roles: Mapping[str, float] = Field(
        default_factory=lambda: {
            "CEO": 420_000,
            "CTO": 280_000,
            "CFO": 350_000,
            "COO": 300_000,
            "VP_Sales": 650_000,
            "Sales_Director": 1_100_000,
            "CMO": 220_000,
            "VP_Marketing": 520_000,
            "Marketing_Director": 980_000,
            "VP_Engineering": 400_000,
        }
    )
    # share of the population per company size bucket; 11-200 is most B2B buyers
    company_sizes: Mapping[str, float] = Field(
        default_factory=lambda: {
            "1-10": 0.18,
            "11-50": 0.24,
            "51-200": 0.26,
            "201-1000": 0.20,
            "1000+": 0.12,
        }
    )
    # reachable fraction after filters, activity and seniority constraints
    data_sources: Mapping[str, float] = Field(
        default_factory=lambda: {
            "LinkedIn": 0.65,
            "Industry_databases": 0.55,
            "Public_records": 0.50,
            "Custom": 0.45,
        }
    )

    unknown_industry_weight: float = 5_000_000
    unknown_role_weight: float = 400_000
    unknown_company_size_fraction: float = 0.2
    fallback_data_source: str = "Custom"

    confidence_lower: float = 0.65
    confidence_upper: float = 1.35

    @field_validator("industries", "roles", "company_sizes", "data_sources", mode="after")
    @classmethod
    def _read_only(cls, v: Mapping[str, float]) -> Mapping[str, float]:
        return MappingProxyType(dict(v))

    @field_serializer("industries", "roles", "company_sizes", "data_sources")
    def _plain_dict(self, v: Mapping[str, float]) -> dict[str, float]:
        return dict(v)

    @model_validator(mode="after")
    def _check_fallback_and_band(self) -> "MarketWeights":
        if self.fallback_data_source not in self.data_sources:
            raise ValueError(
                f"fallback_data_source {self.fallback_data_source!r} is not a configured data source"
            )
        if not 0 <= self.confidence_lower <= 1 <= self.confidence_upper:
            raise ValueError("confidence band must satisfy 0 <= lower <= 1 <= upper")
        return self

    def industry_weight(self, label: str) -> float:
        return self.industries.get(label, self.unknown_industry_weight)

    def role_weight(self, label: str) -> float:
        return self.roles.get(label, self.unknown_role_weight)

    def company_size_fraction(self, label: str) -> float:
        return self.company_sizes.get(label, self.unknown_company_size_fraction)

    def data_source_fraction(self, label: str) -> float:
        if label in self.data_sources:
            return self.data_sources[label]
        return self.data_sources[self.fallback_data_source]


DEFAULT_MARKET_WEIGHTS = MarketWeights()
