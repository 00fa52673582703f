from dataclasses import replace

import numpy as np
import pytest

from safcost.finance import (amortize_capex, annual_saf_gallons, blend, build_cost_components,
                             electricity_cost_per_gal, post_credit_total)
from safcost.scenario import compute_all
from safcost.utils import ScenarioInputs

GAL_PER_TON = 264.172


def hefa_inputs(**kwargs):
    p = ScenarioInputs(pathway='HEFA', base_electricity_mwh_per_year=85_000)
    return replace(p, **kwargs)


def test_hefa_baseline_components(hefa):
    results = hefa.compute()
    by_name = {c.name: c.usd_per_gal for c in results.components}
    feedstock = 800 * 1.1 / GAL_PER_TON
    hydrogen = 6.5 * 0.5 / GAL_PER_TON
    electricity = 85_000 * 1000 * 0.08 / (100 * 1000 * GAL_PER_TON)
    assert by_name['Feedstock'] == pytest.approx(feedstock, abs=1e-3)
    assert by_name['Hydrogen'] == pytest.approx(hydrogen, abs=1e-3)
    assert by_name['Electricity'] == pytest.approx(electricity, abs=1e-3)
    assert by_name['Chemicals'] == pytest.approx(0.12, abs=1e-3)
    assert by_name['O&M'] == pytest.approx(0.35, abs=1e-3)
    assert by_name['Logistics'] == pytest.approx(0.30, abs=1e-3)
    expected = feedstock + hydrogen + electricity + 0.12 + 0.35 + 0.30
    assert results.total_pre_credit == pytest.approx(expected, abs=1e-3)


def test_components_sorted_and_shares_sum_to_one():
    rows, total = build_cost_components(hefa_inputs())
    shares = [c.share for c in rows]
    assert shares == sorted(shares, reverse=True)
    assert sum(shares) == pytest.approx(1.0)
    assert sum(c.usd_per_gal for c in rows) == pytest.approx(total, abs=1e-2)
    assert rows[0].name == 'Feedstock'


def test_zero_total_gives_zero_shares():
    p = hefa_inputs(feedstock_usd_per_ton=0, hydrogen_usd_per_kg=0, electricity_usd_per_kwh=0,
                    chemicals_usd_per_gal=0, om_usd_per_gal=0, logistics_usd_per_gal=0)
    rows, total = build_cost_components(p)
    assert total == 0
    assert all(c.share == 0 for c in rows)
    assert [c.name for c in rows] == ['Feedstock', 'Hydrogen', 'Electricity', 'Chemicals', 'O&M', 'Logistics']


def test_co2_fed_pathway_uses_co2_and_electrolytic_hydrogen():
    p = ScenarioInputs(pathway='Novel PtL - Pure Electrolyzer', co2_usd_per_ton=50, co2_tons_per_ton_saf=3.5,
                       feedstock_usd_per_ton=10_000, hydrogen_usd_per_kg=100, electricity_usd_per_kwh=0.05)
    by_name = {c.name: c.usd_per_gal for c in build_cost_components(p)[0]}
    assert by_name['CO₂ (DAC/Industrial)'] == pytest.approx(50 * 3.5 / GAL_PER_TON)
    assert by_name['Hydrogen'] == pytest.approx(0.05 * 43.4 * (0.5 / GAL_PER_TON))
    assert 'Feedstock' not in by_name


def test_canonical_ptl_keeps_generic_feedstock():
    p = ScenarioInputs(pathway='PtL (e-fuels)', feedstock_usd_per_ton=400, co2_usd_per_ton=9_999)
    by_name = {c.name: c.usd_per_gal for c in build_cost_components(p)[0]}
    assert by_name['Feedstock'] == pytest.approx(400 * 1.1 / GAL_PER_TON)


def test_electricity_per_gallon_scales_with_demand_not_size():
    small = hefa_inputs(plant_size_kton_per_year=50)
    large = hefa_inputs(plant_size_kton_per_year=200)
    # demand is linear in size, so the per-gallon charge is unchanged
    assert electricity_cost_per_gal(small) == pytest.approx(electricity_cost_per_gal(large))
    assert annual_saf_gallons(large) == pytest.approx(200 * 1000 * GAL_PER_TON)


def test_post_credit_is_clamped():
    assert post_credit_total(3.0, 1.25) == pytest.approx(1.75)
    assert post_credit_total(3.0, 10.0) == 0.0
    rng = np.random.default_rng(42)
    for pre, credit in rng.uniform(0, 10, size=(100, 2)):
        assert post_credit_total(pre, credit) == max(pre - credit, 0.0)


def test_amortize_capex():
    total, debt, per_gal = amortize_capex({'a': 20e6, 'b': 20e6}, annual_gallons=1e6)
    assert total == 40e6
    assert debt == 2e6
    assert per_gal == 2.0
    assert amortize_capex({'a': 20e6}, annual_gallons=0)[2] == 0.0


def test_capex_is_not_part_of_production_cost():
    p = hefa_inputs()
    cheap = compute_all(p, {'Reactor': 1.0})
    dear = compute_all(p, {'Reactor': 5e9})
    assert cheap.total_pre_credit == dear.total_pre_credit
    assert dear.capex_per_gal > cheap.capex_per_gal


def test_blend_endpoints_are_exact():
    assert blend(4.87, 2.3, 0) == (2.3, 0.0)
    blended, _ = blend(4.87, 2.3, 100)
    assert blended == 4.87


def test_blend_mid_and_premium():
    blended, premium = blend(4.3, 2.3, 50)
    assert blended == pytest.approx(3.3)
    assert premium == pytest.approx(1.0 / 2.3 * 100)
    assert blend(4.3, 0.0, 10)[1] == 0.0
