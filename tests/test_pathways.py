import pytest

from safcost import pathways
from safcost.pathways import PATHWAYS, PathwayId, get_pathway

PTL_FAMILY = {PathwayId.PTL, PathwayId.NOVEL_PTL_ELECTROLYZER, PathwayId.NOVEL_PTL_BIOMASS}


def test_catalog_has_seven_pathways():
    assert len(pathways.list_pathways()) == 7
    assert 'HEFA' in pathways.list_pathways()


@pytest.mark.parametrize('pid', list(PathwayId))
def test_shares_sum_to_100(pid):
    assert sum(pathways.base_shares(pid).values()) == 100


@pytest.mark.parametrize('pid', list(PathwayId))
def test_ptl_defaults_only_for_ptl_family(pid):
    defaults = pathways.ptl_defaults(pid)
    if pid in PTL_FAMILY:
        assert defaults.grid_kg_per_kwh == 0.05
        assert defaults.kwh_per_gal == 15
    else:
        assert defaults is None


def test_capability_flags():
    assert get_pathway(PathwayId.PTL).uses_electrolytic_hydrogen
    assert not get_pathway(PathwayId.PTL).uses_co2_feedstock
    assert get_pathway(PathwayId.PTL).applies_grid_ci_addon
    for pid in (PathwayId.NOVEL_PTL_ELECTROLYZER, PathwayId.NOVEL_PTL_BIOMASS):
        pw = get_pathway(pid)
        assert pw.uses_co2_feedstock and pw.uses_electrolytic_hydrogen
        assert not pw.applies_grid_ci_addon
    hefa = get_pathway(PathwayId.HEFA)
    assert not (hefa.uses_co2_feedstock or hefa.uses_electrolytic_hydrogen or hefa.applies_grid_ci_addon)


def test_feedstock_labels_and_co2_defaults():
    assert get_pathway('HEFA').feedstock_label == 'Feedstock'
    assert get_pathway('Novel PtL - Pure Electrolyzer').feedstock_label == 'CO₂ (DAC/Industrial)'
    assert get_pathway('Novel PtL - Biomass').feedstock_label == 'CO₂ (Biomass gasification)'
    assert get_pathway('Novel PtL - Pure Electrolyzer').default_co2_usd_per_ton == 50
    assert get_pathway('Novel PtL - Biomass').default_co2_usd_per_ton == 80
    assert get_pathway('ATJ').default_co2_usd_per_ton is None


def test_baseline_values():
    assert pathways.base_ci('HEFA') == 2.8
    assert pathways.base_electricity_mwh('HEFA') == 85_000
    assert pathways.base_electricity_mwh(PathwayId.NOVEL_PTL_ELECTROLYZER) == 2_087_540
    assert pathways.description('ATJ').startswith('Alcohol-to-Jet')


def test_equipment_costs_are_copies():
    costs = pathways.base_equipment_costs('HEFA')
    costs['Reactor & Hydrotreater'] = 0
    assert pathways.base_equipment_costs('HEFA')['Reactor & Hydrotreater'] == 45_000_000


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        PATHWAYS[PathwayId.HEFA].equipment_usd['Gasifier'] = 1


def test_unknown_pathway_raises():
    with pytest.raises(ValueError):
        get_pathway('Coal-to-Liquids')
