from __future__ import annotations

from dataclasses import asdict
from typing import Any

from leadcalc.adapters.logging_utils import get_logger, log_context
from leadcalc.adapters.weights_io import resolve_market_weights
from leadcalc.analysis.charts import cost_chart_data, funnel_chart_data, tam_chart_data
from leadcalc.domain.roi import ROIResult, calculate_roi, frequency_multiplier
from leadcalc.domain.rounding import clamp_finite
from leadcalc.domain.tam import TAMResult, calculate_tam
from leadcalc.domain.weights import MarketWeights
from leadcalc.services.validation import build_roi_configuration, build_tam_configuration

logger = get_logger(__name__)


def tam_result_to_dict(result: TAMResult) -> dict[str, Any]:
    return asdict(result)


def roi_result_to_dict(result: ROIResult) -> dict[str, Any]:
    return asdict(result)


def estimate_tam(
    raw_payload: dict[str, Any],
    weights: MarketWeights | None = None,
) -> dict[str, Any]:
    """
    Validate a TAM payload, run the estimator and build the report.

    Raises ValueError for payloads the form would have refused (empty
    selections). Everything past validation is total.
    """
    cfg = build_tam_configuration(raw_payload)
    w = weights if weights is not None else resolve_market_weights()

    result = calculate_tam(cfg, w)

    unknown = (
        [i for i in cfg.industries if i not in w.industries]
        + [r for r in cfg.roles if r not in w.roles]
        + [s for s in cfg.company_sizes if s not in w.company_sizes]
    )
    if unknown:
        logger.info("tam_fallback_weights", extra=log_context(labels=unknown))

    report = tam_result_to_dict(result)
    report.update(
        {
            "region": cfg.primary_region,
            "data_source": cfg.data_source,
            "selections": {
                "industries": list(cfg.industries),
                "roles": list(cfg.roles),
                "company_sizes": list(cfg.company_sizes),
            },
            "charts": tam_chart_data(result),
        }
    )

    logger.info(
        "tam_estimated",
        extra=log_context(
            n_industries=len(cfg.industries),
            n_roles=len(cfg.roles),
            data_source=cfg.data_source,
            estimated_reachable=result.estimated_reachable,
        ),
    )
    return report


def estimate_roi(raw_payload: dict[str, Any]) -> dict[str, Any]:
    """
    Validate an ROI payload, run the funnel model and build the report.

    `touches_per_month` describes the outreach cadence only; it does not
    feed any of the cost totals.
    """
    cfg = build_roi_configuration(raw_payload)
    result = calculate_roi(cfg)

    report = roi_result_to_dict(result)
    report.update(
        {
            "ltv": clamp_finite(cfg.lifetime_value()),
            "outreach_frequency": cfg.outreach_frequency,
            "touches_per_month": frequency_multiplier(cfg.outreach_frequency),
            "charts": {
                "funnel": funnel_chart_data(cfg.leads, result.funnel_breakdown),
                "costs": cost_chart_data(cfg),
            },
        }
    )

    if not result.break_even_leads.reachable:
        logger.info("roi_break_even_unreachable", extra=log_context(leads=cfg.leads))

    logger.info(
        "roi_estimated",
        extra=log_context(
            leads=cfg.leads,
            deals_closed=result.funnel_breakdown.deals_closed,
            roi=result.roi,
        ),
    )
    return report
