import sys

from fixtures.campaigns import default_campaign, tech_ceo_segment
from leadcalc.analysis.charts import (
    cost_chart_data,
    display_name,
    funnel_chart_data,
    tam_chart_data,
)
from leadcalc.domain.roi import calculate_roi
from leadcalc.domain.tam import calculate_tam


def test_display_name_replaces_underscores():
    assert display_name("Real_Estate") == "Real Estate"
    assert display_name("VP_Sales") == "VP Sales"
    assert display_name("CEO") == "CEO"


def test_tam_chart_data_series():
    r = calculate_tam(tech_ceo_segment(roles=("VP_Sales", "CEO"), company_sizes=("1-10", "51-200")))

    charts = tam_chart_data(r)

    assert charts["industry"] == [{"name": "Technology", "value": 11_700_000}]
    assert [p["name"] for p in charts["role"]] == ["VP Sales", "CEO"]
    assert [p["name"] for p in charts["company_size"]] == ["1-10", "51-200"]


def test_funnel_chart_starts_with_leads():
    cfg = default_campaign()
    r = calculate_roi(cfg)

    series = funnel_chart_data(cfg.leads, r.funnel_breakdown)

    assert [p["name"] for p in series] == [
        "Leads",
        "Opens",
        "Replies",
        "Meetings Booked",
        "Meetings Shown",
        "Deals Closed",
    ]
    assert [p["value"] for p in series] == [10_000, 2_500, 125, 38, 30, 6]


def test_cost_chart_sums_to_total_costs():
    cfg = default_campaign()
    r = calculate_roi(cfg)

    series = cost_chart_data(cfg)

    assert {p["name"]: p["value"] for p in series} == {
        "Lead Costs": 10_000,
        "Tool Costs": 600,
        "Time Costs": 1_000,
        "Other Expenses": 500,
    }
    assert sum(p["value"] for p in series) == r.total_costs


def test_overflowing_chart_values_are_pinned():
    cfg = default_campaign(leads=1e308, cost_per_lead=10)
    r = calculate_roi(cfg)

    costs = cost_chart_data(cfg)
    funnel = funnel_chart_data(float("inf"), r.funnel_breakdown)

    assert costs[0] == {"name": "Lead Costs", "value": sys.float_info.max}
    assert funnel[0]["value"] == sys.float_info.max
