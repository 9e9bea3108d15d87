# tests/test_estimator_properties.py

import json
from dataclasses import asdict

from hypothesis import given, strategies as st

from fixtures.campaigns import default_campaign, free_campaign, tech_ceo_segment
from leadcalc.domain.roi import calculate_roi
from leadcalc.domain.tam import TAMConfiguration, calculate_tam
from leadcalc.domain.weights import COMMON_ROLES, COMPANY_SIZES, DATA_SOURCES, INDUSTRIES

percent = st.floats(min_value=0.0, max_value=100.0, allow_nan=False)
money = st.floats(min_value=0.0, max_value=1_000_000.0, allow_nan=False)
any_number = st.floats(allow_nan=False, allow_infinity=False)

# known labels plus free text, like the form's "add custom" box
industry_labels = st.one_of(st.sampled_from(INDUSTRIES), st.text(min_size=1, max_size=12))
role_labels = st.one_of(st.sampled_from(COMMON_ROLES), st.text(min_size=1, max_size=12))
size_labels = st.one_of(st.sampled_from(COMPANY_SIZES), st.text(min_size=1, max_size=6))

segments = st.builds(
    TAMConfiguration,
    industries=st.lists(industry_labels, max_size=5).map(tuple),
    roles=st.lists(role_labels, max_size=5).map(tuple),
    company_sizes=st.lists(size_labels, max_size=5).map(tuple),
    geographic_filters=st.just(("US",)),
    data_source=st.one_of(st.sampled_from(DATA_SOURCES), st.text(max_size=8)),
    custom_multiplier=st.one_of(st.none(), st.floats(min_value=0.01, max_value=10.0)),
)


@given(
    leads=st.floats(min_value=0.0, max_value=1_000_000.0, allow_nan=False),
    open_rate=percent,
    reply_rate=percent,
    meeting_booked_rate=percent,
    meeting_show_rate=percent,
    deal_close_rate=percent,
)
def test_funnel_never_grows(leads, open_rate, reply_rate, meeting_booked_rate, meeting_show_rate, deal_close_rate):
    r = calculate_roi(
        default_campaign(
            leads=leads,
            open_rate=open_rate,
            reply_rate=reply_rate,
            meeting_booked_rate=meeting_booked_rate,
            meeting_show_rate=meeting_show_rate,
            deal_close_rate=deal_close_rate,
        )
    )
    f = r.funnel_breakdown

    assert f.opens >= f.replies >= f.meetings_booked >= f.meetings_shown >= f.deals_closed >= 0


@given(leads=st.floats(min_value=0.0, max_value=100_000.0), deal_value=money)
def test_zero_costs_zero_ratios(leads, deal_value):
    r = calculate_roi(free_campaign(leads=leads, average_deal_value=deal_value))

    assert r.roi == 0
    assert r.roi_multiple == 0


@given(leads=st.floats(min_value=0.0, max_value=100_000.0), costs=money)
def test_no_deals_break_even_unreachable(leads, costs):
    r = calculate_roi(default_campaign(leads=leads, deal_close_rate=0, other_expenses=costs))

    assert not r.break_even_leads.reachable


@given(leads=st.floats(min_value=0.0, max_value=100_000.0), costs=money, ltv=money)
def test_roi_is_deterministic(leads, costs, ltv):
    cfg = default_campaign(leads=leads, time_costs=costs, customer_ltv=ltv)
    assert calculate_roi(cfg) == calculate_roi(cfg)


@given(cfg=segments)
def test_tam_band_brackets_reachable(cfg):
    r = calculate_tam(cfg)

    assert r.base_market_size >= 0
    assert r.estimated_reachable >= 0
    assert r.confidence_interval.lower <= r.estimated_reachable <= r.confidence_interval.upper


@given(cfg=segments, extra=industry_labels)
def test_tam_extra_industry_never_shrinks_base(cfg, extra):
    before = calculate_tam(cfg)
    after = calculate_tam(
        TAMConfiguration(
            industries=cfg.industries + (extra,),
            roles=cfg.roles,
            company_sizes=cfg.company_sizes,
            geographic_filters=cfg.geographic_filters,
            data_source=cfg.data_source,
            custom_multiplier=cfg.custom_multiplier,
        )
    )

    assert after.base_market_size >= before.base_market_size


@given(cfg=segments)
def test_tam_is_deterministic(cfg):
    assert calculate_tam(cfg) == calculate_tam(cfg)


@given(
    leads=any_number,
    cost_per_lead=any_number,
    average_deal_value=any_number,
    customer_ltv=st.one_of(st.none(), any_number),
)
def test_roi_results_are_always_json_numbers(leads, cost_per_lead, average_deal_value, customer_ltv):
    r = calculate_roi(
        default_campaign(
            leads=leads,
            cost_per_lead=cost_per_lead,
            average_deal_value=average_deal_value,
            customer_ltv=customer_ltv,
        )
    )
    json.dumps(asdict(r), allow_nan=False)


@given(multiplier=any_number)
def test_tam_results_are_always_json_numbers(multiplier):
    r = calculate_tam(tech_ceo_segment(custom_multiplier=multiplier))
    json.dumps(asdict(r), allow_nan=False)
