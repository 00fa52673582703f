
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional


class PathwayId(str, Enum):
    HEFA = 'HEFA'
    ATJ = 'ATJ'
    FT_BTL = 'FT-BTL'
    PTL = 'PtL (e-fuels)'
    NOVEL_PTL_ELECTROLYZER = 'Novel PtL - Pure Electrolyzer'
    NOVEL_PTL_BIOMASS = 'Novel PtL - Biomass'
    GASIFICATION_FT_CCS = 'Gasification-FT + CCS'


@dataclass(frozen=True)
class PtlDefaults:
    grid_kg_per_kwh: float
    kwh_per_gal: float


@dataclass(frozen=True)
class Pathway:
    id: PathwayId
    description: str
    base_shares: Mapping[str, float]  # illustrative %, display only
    base_ci_kg_per_gal: float
    equipment_usd: Mapping[str, float]  # at the 100 kton/yr reference plant
    electricity_mwh_per_year: float  # at the 100 kton/yr reference plant
    ptl_defaults: Optional[PtlDefaults] = None
    uses_co2_feedstock: bool = False
    uses_electrolytic_hydrogen: bool = False
    applies_grid_ci_addon: bool = False
    feedstock_label: str = 'Feedstock'
    default_co2_usd_per_ton: Optional[float] = None  # applied on pathway switch

    def equipment_costs(self) -> Dict[str, float]:
        return dict(self.equipment_usd)


_PTL_SHARES = {
    'Electricity – Electrolysis': 45,
    'Electricity – Synthesis/Compression': 10,
    'CO₂ Capture/Sourcing': 10,
    'H₂ Plant CAPEX & O&M': 10,
    'FT/Synfuels CAPEX & O&M': 15,
    'Chemicals': 2,
    'Logistics': 2,
    'Other': 6,
}
_PTL_DEFAULTS = PtlDefaults(grid_kg_per_kwh=0.05, kwh_per_gal=15.0)


def _pathway(**kwargs) -> Pathway:
    kwargs['base_shares'] = MappingProxyType(dict(kwargs['base_shares']))
    kwargs['equipment_usd'] = MappingProxyType(dict(kwargs['equipment_usd']))
    return Pathway(**kwargs)


PATHWAYS: Mapping[PathwayId, Pathway] = MappingProxyType({p.id: p for p in [
    _pathway(
        id=PathwayId.HEFA,
        description='Hydroprocessed Esters & Fatty Acids (lipids → HEFA-SPK)',
        base_shares={
            'Feedstock (oils/lipids)': 58,
            'Hydrogen': 12,
            'Utilities (power/heat/water)': 6,
            'Chemicals': 2,
            'O&M': 7,
            'CAPEX & Financing': 11,
            'Logistics': 4,
        },
        base_ci_kg_per_gal=2.8,
        equipment_usd={
            'Reactor & Hydrotreater': 45_000_000,
            'Distillation & Sep': 25_000_000,
            'Storage & Handling': 15_000_000,
            'Utilities (Power/Heat)': 20_000_000,
            'Control & Safety': 10_000_000,
        },
        electricity_mwh_per_year=85_000,
    ),
    _pathway(
        id=PathwayId.ATJ,
        description='Alcohol-to-Jet (ethanol/isobutanol → ATJ-SPK)',
        base_shares={
            'Feedstock (alcohol)': 45,
            'Utilities': 12,
            'Chemicals': 5,
            'O&M': 12,
            'CAPEX & Financing': 21,
            'Logistics': 5,
        },
        base_ci_kg_per_gal=4.2,  # corn ethanol feedstock
        equipment_usd={
            'Fermentation Reactor': 35_000_000,
            'Distillation Unit': 28_000_000,
            'Dehydration & Conversion': 40_000_000,
            'Storage & Handling': 18_000_000,
            'Control & Safety': 12_000_000,
        },
        electricity_mwh_per_year=120_000,
    ),
    _pathway(
        id=PathwayId.FT_BTL,
        description='Fischer–Tropsch Biomass-to-Liquids',
        base_shares={
            'Feedstock (biomass)': 30,
            'Utilities': 18,
            'Chemicals': 3,
            'O&M': 16,
            'CAPEX & Financing': 28,
            'Logistics': 5,
        },
        base_ci_kg_per_gal=1.8,
        equipment_usd={
            'Gasifier': 60_000_000,
            'Fischer-Tropsch Reactor': 55_000_000,
            'Product Separation': 30_000_000,
            'Storage & Handling': 20_000_000,
            'Control & Safety': 15_000_000,
        },
        electricity_mwh_per_year=180_000,
    ),
    _pathway(
        id=PathwayId.PTL,
        description='Power-to-Liquids (CO₂ + H₂ → e-kerosene)',
        base_shares=_PTL_SHARES,
        base_ci_kg_per_gal=1.5,  # low-carbon power; grid add-on applied on top
        equipment_usd={
            'Electrolyzer': 35_000_000,
            'CO₂ Capture Unit': 22_000_000,
            'Synfuels Reactor': 32_000_000,
            'Compression & Storage': 15_000_000,
            'Control & Safety': 6_000_000,
        },
        electricity_mwh_per_year=450_000,
        ptl_defaults=_PTL_DEFAULTS,
        uses_electrolytic_hydrogen=True,
        applies_grid_ci_addon=True,
    ),
    _pathway(
        id=PathwayId.NOVEL_PTL_ELECTROLYZER,
        description='Novel synthesis technology: CO₂ + H₂ → SAF (H₂ from electrolysis, CO₂ from DAC/industrial)',
        base_shares=_PTL_SHARES,
        base_ci_kg_per_gal=1.2,
        equipment_usd={
            'Electrolyzer': 163_136_986,
            'Auxiliary Systems': 55_000_000,
            'Synfuels Reactor': 90_000_000,
            'Catalysts & Others': 22_000_000,
            'Control, Safety & Reserves': 49_000_000,
        },
        electricity_mwh_per_year=2_087_540,
        ptl_defaults=_PTL_DEFAULTS,
        uses_co2_feedstock=True,
        uses_electrolytic_hydrogen=True,
        feedstock_label='CO₂ (DAC/Industrial)',
        default_co2_usd_per_ton=50.0,
    ),
    _pathway(
        id=PathwayId.NOVEL_PTL_BIOMASS,
        description='Novel synthesis technology: CO₂ + H₂ → SAF (H₂ from electrolysis, CO₂ from biomass gasification)',
        base_shares=_PTL_SHARES,
        base_ci_kg_per_gal=0.8,  # biogenic CO2
        equipment_usd={
            'Electrolyzer': 163_136_986,
            'Auxiliary Systems': 80_000_000,
            'Synfuels Reactor & Gassifier': 160_000_000,
            'Catalysts & Others': 24_000_000,
            'Control, Safety & Reserves': 70_000_000,
        },
        electricity_mwh_per_year=963_480,
        ptl_defaults=_PTL_DEFAULTS,
        uses_co2_feedstock=True,
        uses_electrolytic_hydrogen=True,
        feedstock_label='CO₂ (Biomass gasification)',
        default_co2_usd_per_ton=80.0,  # biomass cost rather than capture
    ),
    _pathway(
        id=PathwayId.GASIFICATION_FT_CCS,
        description='Biomass MSW gasification → FT with CO₂ capture & storage',
        base_shares={
            'Feedstock (biomass/MSW)': 25,
            'Utilities': 16,
            'Chemicals': 3,
            'O&M': 18,
            'CAPEX & Financing': 32,
            'CO₂ Transport & Storage': 4,
            'Logistics': 2,
        },
        base_ci_kg_per_gal=0.8,
        equipment_usd={
            'Gasifier': 70_000_000,
            'Fischer-Tropsch Unit': 60_000_000,
            'CO₂ Capture & Compression': 45_000_000,
            'Storage & Sequestration': 25_000_000,
            'Control & Safety': 15_000_000,
        },
        electricity_mwh_per_year=280_000,
    ),
]})


def get_pathway(pathway) -> Pathway:
    try:
        return PATHWAYS[PathwayId(pathway)]
    except ValueError:
        raise ValueError(f"Unknown pathway '{pathway}', expected one of {[p.value for p in PathwayId]}") from None


def list_pathways() -> List[str]:
    return [p.value for p in PATHWAYS]


def description(pathway) -> str:
    return get_pathway(pathway).description


def base_shares(pathway) -> Dict[str, float]:
    return dict(get_pathway(pathway).base_shares)


def base_ci(pathway) -> float:
    return get_pathway(pathway).base_ci_kg_per_gal


def ptl_defaults(pathway) -> Optional[PtlDefaults]:
    return get_pathway(pathway).ptl_defaults


def base_equipment_costs(pathway) -> Dict[str, float]:
    return get_pathway(pathway).equipment_costs()


def base_electricity_mwh(pathway) -> float:
    return get_pathway(pathway).electricity_mwh_per_year
