# src/leadcalc/services/validation.py

import math
from typing import Any, Iterable

from leadcalc.adapters.config import config
from leadcalc.domain.roi import FREQUENCY_MULTIPLIERS, ROIConfiguration
from leadcalc.domain.tam import TAMConfiguration

EMPTY_SELECTION_MESSAGE = "Please select at least one industry, role, and company size"

# Defaults mirror the calculator form's initial state
DEFAULT_ROI_FIELDS: dict[str, Any] = {
    "outreach_frequency": "monthly",
    "campaign_duration": 3.0,
    "open_rate": 25.0,
    "reply_rate": 5.0,
    "meeting_booked_rate": 30.0,
    "meeting_show_rate": 80.0,
    "deal_close_rate": 20.0,
    "average_deal_value": 10_000.0,
    "contract_length": 12.0,
    "cost_per_lead": 1.0,
    "tool_costs": 200.0,
    "time_costs": 1_000.0,
    "other_expenses": 500.0,
}

ROI_NUMERIC_FIELDS = [k for k, v in DEFAULT_ROI_FIELDS.items() if isinstance(v, float)]


def clean_number_text(s: str) -> str:
    """Trim, drop thousands separators and a trailing '%' ("2,500" -> "2500")."""
    s = s.strip().replace(",", "")
    if s.endswith("%"):
        # rates are already 0-100, so the sign is just dropped
        s = s[:-1].strip()
    return s


def _to_num(val: Any, field_name: str) -> float:
    """
    Coerce values like:
      - 2500
      - "2500"
      - "2,500"
      - "25%"
    into a finite float.
    """
    if val is None or (isinstance(val, str) and not clean_number_text(val)):
        raise ValueError(f"Missing required numeric field: {field_name}")
    if isinstance(val, bool) or not isinstance(val, (int, float, str)):
        raise ValueError(f"Invalid type for {field_name}: {type(val)}")

    try:
        result = float(clean_number_text(val) if isinstance(val, str) else val)
    except (ValueError, OverflowError):
        raise ValueError(f"Invalid number for {field_name}: {val!r}") from None

    if not math.isfinite(result):
        raise ValueError(f"Invalid number for {field_name}: {val!r}")
    return result


def _to_num_optional(val: Any) -> float | None:
    """
    Lenient converter for optional numeric fields.
    Returns None when missing/blank/garbage/non-finite.
    """
    if val is None or isinstance(val, bool):
        return None
    if isinstance(val, (int, float)):
        try:
            result = float(val)
        except OverflowError:
            return None
    elif isinstance(val, str):
        s = clean_number_text(val)
        if not s:
            return None
        try:
            result = float(s)
        except ValueError:
            return None
    else:
        return None
    return result if math.isfinite(result) else None


def normalize_labels(values: Iterable[Any] | str | None) -> tuple[str, ...]:
    """
    Trim, drop blanks and de-duplicate labels, keeping first-seen order.

    Accepts a single comma separated string as well (CLI / query params).
    """
    if values is None:
        return ()
    if isinstance(values, str):
        values = values.split(",")

    out: list[str] = []
    for v in values:
        if v is None:
            continue
        label = str(v).strip()
        if label and label not in out:
            out.append(label)
    return tuple(out)


def build_tam_configuration(raw: dict[str, Any]) -> TAMConfiguration:
    """
    Normalize a TAM payload into a TAMConfiguration.

    The estimator happily returns 0 for empty selections; refusing them here
    is what the form does before ever calling it.
    """
    industries = normalize_labels(raw.get("industries"))
    roles = normalize_labels(raw.get("roles"))
    company_sizes = normalize_labels(raw.get("company_sizes"))

    if not industries or not roles or not company_sizes:
        raise ValueError(EMPTY_SELECTION_MESSAGE)

    geographic_filters = normalize_labels(raw.get("geographic_filters")) or (config.DEFAULT_GEOGRAPHY,)
    data_source = str(raw.get("data_source") or "").strip() or config.DEFAULT_DATA_SOURCE

    return TAMConfiguration(
        industries=industries,
        roles=roles,
        company_sizes=company_sizes,
        geographic_filters=geographic_filters,
        data_source=data_source,
        custom_multiplier=_to_num_optional(raw.get("custom_multiplier")),
    )


def build_roi_configuration(raw: dict[str, Any]) -> ROIConfiguration:
    """
    Normalize an ROI payload into an ROIConfiguration.

    Responsibilities:
      - `leads` must be present.
      - Other numeric fields fall back to the form defaults when omitted.
      - `customer_ltv` is optional; blanks mean "derive from ACV".
    """
    values: dict[str, Any] = {"leads": _to_num(raw.get("leads"), "leads")}

    for field in ROI_NUMERIC_FIELDS:
        val = raw.get(field)
        values[field] = DEFAULT_ROI_FIELDS[field] if val is None else _to_num(val, field)

    frequency = str(raw.get("outreach_frequency") or DEFAULT_ROI_FIELDS["outreach_frequency"]).strip().lower()
    if frequency not in FREQUENCY_MULTIPLIERS:
        raise ValueError(
            f"Invalid outreach_frequency: {frequency!r} (expected one of {sorted(FREQUENCY_MULTIPLIERS)})"
        )
    values["outreach_frequency"] = frequency
    values["customer_ltv"] = _to_num_optional(raw.get("customer_ltv"))

    return ROIConfiguration(**values)
