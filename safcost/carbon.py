
from dataclasses import dataclass
from typing import Optional
from .utils import ScenarioInputs
from .pathways import Pathway, get_pathway


@dataclass(frozen=True)
class AbatementResult:
    base_ci: float
    ptl_addon_ci: float
    saf_ci: float
    abatement_kg_per_gal: float
    saf_premium_usd_per_gal: float
    abatement_cost_per_tonne: Optional[float]  # None when nothing is abated


def ptl_electricity_addon(p: ScenarioInputs, pathway: Pathway) -> float:
    # novel CO2-fed variants carry electricity in their baseline CI
    if not pathway.applies_grid_ci_addon:
        return 0.0
    return p.ptl_grid_kg_per_kwh * p.ptl_kwh_per_gal


def saf_carbon_intensity(p: ScenarioInputs, pathway: Pathway = None) -> float:
    pathway = pathway or get_pathway(p.pathway)
    ci = (pathway.base_ci_kg_per_gal + p.transport_add_kg_per_gal
          + ptl_electricity_addon(p, pathway) + p.user_adj_kg_per_gal)
    return max(0.0, ci)


def abatement_cost(saf_premium_usd_per_gal: float, abatement_kg_per_gal: float) -> Optional[float]:
    """USD per tonne CO2e avoided, or None without an abatement basis."""
    if abatement_kg_per_gal <= 0:
        return None
    return saf_premium_usd_per_gal / (abatement_kg_per_gal / 1000.0)


def abatement(p: ScenarioInputs, saf_usd_per_gal: float) -> AbatementResult:
    """Carbon abatement of the selected pathway against fossil jet.

    saf_usd_per_gal is the post-credit SAF production cost.
    """
    pathway = get_pathway(p.pathway)
    addon = ptl_electricity_addon(p, pathway)
    saf_ci = saf_carbon_intensity(p, pathway)
    avoided = max(0.0, p.fossil_ci_kg_per_gal - saf_ci)
    premium = saf_usd_per_gal - p.fossil_usd_per_gal
    return AbatementResult(
        base_ci=pathway.base_ci_kg_per_gal,
        ptl_addon_ci=addon,
        saf_ci=saf_ci,
        abatement_kg_per_gal=avoided,
        saf_premium_usd_per_gal=premium,
        abatement_cost_per_tonne=abatement_cost(premium, avoided),
    )
