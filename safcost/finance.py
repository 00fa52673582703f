
from typing import List, Mapping, Tuple
from .utils import ScenarioInputs, CostComponent, EngineConstants, DEFAULT_CONSTANTS
from .pathways import Pathway, get_pathway
from .equipment import scaled_electricity_mwh, total_equipment_cost


def annual_saf_gallons(p: ScenarioInputs, constants: EngineConstants = DEFAULT_CONSTANTS) -> float:
    return p.plant_size_kton_per_year * 1000.0 * constants.gal_per_ton


def electricity_mwh_per_year(p: ScenarioInputs) -> float:
    return scaled_electricity_mwh(p.plant_size_kton_per_year, p.reference_size_kton_per_year,
                                  p.base_electricity_mwh_per_year)


def feedstock_cost_per_gal(p: ScenarioInputs, pathway: Pathway,
                           constants: EngineConstants = DEFAULT_CONSTANTS) -> float:
    # CO2-fed pathways buy CO2 instead of a biogenic feedstock
    if pathway.uses_co2_feedstock:
        return p.co2_usd_per_ton * p.co2_tons_per_ton_saf / constants.gal_per_ton
    return p.feedstock_usd_per_ton * p.feedstock_tons_per_ton_saf / constants.gal_per_ton


def hydrogen_cost_per_gal(p: ScenarioInputs, pathway: Pathway,
                          constants: EngineConstants = DEFAULT_CONSTANTS) -> float:
    if pathway.uses_electrolytic_hydrogen:
        h2_kg_per_gal = p.hydrogen_kg_per_ton_saf / constants.gal_per_ton
        return p.electricity_usd_per_kwh * constants.electrolyzer_kwh_per_kg_h2 * h2_kg_per_gal
    return p.hydrogen_usd_per_kg * p.hydrogen_kg_per_ton_saf / constants.gal_per_ton


def annual_electricity_cost(p: ScenarioInputs) -> float:
    return electricity_mwh_per_year(p) * 1000.0 * p.electricity_usd_per_kwh


def electricity_cost_per_gal(p: ScenarioInputs, constants: EngineConstants = DEFAULT_CONSTANTS) -> float:
    gallons = annual_saf_gallons(p, constants)
    return annual_electricity_cost(p) / gallons if gallons > 0 else 0.0


def build_cost_components(p: ScenarioInputs, constants: EngineConstants = DEFAULT_CONSTANTS) -> (List[CostComponent], float):
    """Return the six per-gallon cost components, sorted by descending share, and their total."""
    pathway = get_pathway(p.pathway)
    raw = [
        (pathway.feedstock_label, feedstock_cost_per_gal(p, pathway, constants)),
        ('Hydrogen', hydrogen_cost_per_gal(p, pathway, constants)),
        ('Electricity', electricity_cost_per_gal(p, constants)),
        ('Chemicals', p.chemicals_usd_per_gal),
        ('O&M', p.om_usd_per_gal),
        ('Logistics', p.logistics_usd_per_gal),
    ]
    total = sum(v for _, v in raw)
    rows = [CostComponent(name, v, v / total if total > 0 else 0.0) for name, v in raw]
    rows.sort(key=lambda c: c.share, reverse=True)
    return rows, total


def post_credit_total(total_pre_credit: float, policy_credit: float) -> float:
    return max(total_pre_credit - policy_credit, 0.0)


def amortize_capex(equipment_costs: Mapping[str, float], annual_gallons: float,
                   constants: EngineConstants = DEFAULT_CONSTANTS) -> Tuple[float, float, float]:
    """Straight-line capital charge.

    Returns (total equipment cost, annual debt service, CAPEX per gallon).
    The per-gallon figure is informational and is not part of the
    production cost total.
    """
    total = total_equipment_cost(equipment_costs)
    years = constants.capex_years
    annual_debt_service = total / years if years > 0 else 0.0
    per_gal = annual_debt_service / annual_gallons if annual_gallons > 0 else 0.0
    return total, annual_debt_service, per_gal


def blend(saf_usd_per_gal: float, fossil_usd_per_gal: float, blend_pct: float) -> Tuple[float, float]:
    """Blended price and its premium over fossil (in %)."""
    f = blend_pct / 100.0
    if f <= 0:
        blended = fossil_usd_per_gal
    elif f >= 1:
        blended = saf_usd_per_gal
    else:
        blended = f * saf_usd_per_gal + (1.0 - f) * fossil_usd_per_gal
    premium_pct = (blended - fossil_usd_per_gal) / fossil_usd_per_gal * 100.0 if fossil_usd_per_gal > 0 else 0.0
    return blended, premium_pct
