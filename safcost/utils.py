
from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any

DEFAULTS = {
    'fossil_usd_per_gal': 2.3,  # jet fuel reference price
    'policy_credit_usd_per_gal': 0.0,
    'density_kg_per_l': 0.8,  # Jet A/SAF typical
    'feedstock_usd_per_ton': 800.0,  # waste oils, 2024-2025 pricing
    'hydrogen_usd_per_kg': 6.5,  # renewable H2
    'chemicals_usd_per_gal': 0.12,  # non-catalyst chemicals
    'om_usd_per_gal': 0.35,
    'logistics_usd_per_gal': 0.30,
    'electricity_usd_per_kwh': 0.08,
}


@dataclass(frozen=True)
class EngineConstants:
    gal_per_ton: float = 264.172  # 1 t at 0.8 kg/L
    liters_per_gal: float = 3.785411784
    electrolyzer_kwh_per_kg_h2: float = 43.4
    capex_years: int = 20  # straight-line amortization horizon
    hours_per_year: float = 8760.0
    electrolyzer_block_mw: float = 5.0
    electrolyzer_block_usd: float = 3_000_000.0
    electrolyzer_contingency: float = 1.14
    electrolyzer_item: str = 'Electrolyzer'
    min_scale_exponent: float = 0.5
    max_scale_exponent: float = 1.0


DEFAULT_CONSTANTS = EngineConstants()


@dataclass
class ScenarioInputs:
    # display
    currency: str = 'USD'
    fx_rate: float = 1.0  # display currency per USD
    unit: str = 'gal'
    density_kg_per_l: float = DEFAULTS['density_kg_per_l']
    # pathway & preset
    pathway: str = 'Novel PtL - Pure Electrolyzer'
    preset: str = 'Baseline'
    # market, USD/gal
    fossil_usd_per_gal: float = DEFAULTS['fossil_usd_per_gal']
    policy_credit_usd_per_gal: float = DEFAULTS['policy_credit_usd_per_gal']
    blend_pct: float = 10.0
    # production
    feedstock_usd_per_ton: float = DEFAULTS['feedstock_usd_per_ton']
    feedstock_tons_per_ton_saf: float = 1.1
    hydrogen_usd_per_kg: float = DEFAULTS['hydrogen_usd_per_kg']
    hydrogen_kg_per_ton_saf: float = 0.5
    co2_usd_per_ton: float = 50.0  # DAC or biomass gasification
    co2_tons_per_ton_saf: float = 3.5
    chemicals_usd_per_gal: float = DEFAULTS['chemicals_usd_per_gal']
    om_usd_per_gal: float = DEFAULTS['om_usd_per_gal']
    logistics_usd_per_gal: float = DEFAULTS['logistics_usd_per_gal']
    # plant economics
    plant_size_kton_per_year: float = 100.0
    reference_size_kton_per_year: float = 100.0
    base_electricity_mwh_per_year: float = 20000.0  # at reference size
    electricity_usd_per_kwh: float = DEFAULTS['electricity_usd_per_kwh']
    equip_scale_exponent: float = 0.7  # sublinear
    # LCA, kg CO2e/gal
    fossil_ci_kg_per_gal: float = 10.0
    transport_add_kg_per_gal: float = 0.0
    user_adj_kg_per_gal: float = 0.0
    ptl_grid_kg_per_kwh: float = 0.05
    ptl_kwh_per_gal: float = 15.0


@dataclass(frozen=True)
class CostComponent:
    name: str
    usd_per_gal: float
    share: float = 0.0  # fraction of pre-credit total


@dataclass
class DerivedResults:
    pathway: str
    components: List[CostComponent]
    total_pre_credit: float
    total_post_credit: float
    total_equipment_cost: float
    annual_debt_service: float
    capex_per_gal: float
    electricity_mwh_per_year: float
    annual_electricity_cost: float
    electricity_per_gal: float
    annual_saf_gallons: float
    blended_usd_per_gal: float
    blended_premium_pct: float
    base_ci: float
    ptl_addon_ci: float
    saf_ci: float
    abatement_kg_per_gal: float
    saf_premium_usd_per_gal: float
    abatement_cost_per_tonne: Optional[float]
    equipment_costs: Dict[str, float] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        out = dict(self.__dict__)
        out['components'] = [c.__dict__.copy() for c in self.components]
        out['equipment_costs'] = dict(self.equipment_costs)
        return out


def clamp(value: float, low: Optional[float] = None, high: Optional[float] = None) -> float:
    if low is not None and value < low:
        return low
    if high is not None and value > high:
        return high
    return value
