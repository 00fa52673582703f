
import logging
from dataclasses import dataclass, replace, fields
from typing import Dict, Any, Optional, Mapping, Tuple
import numpy as np
from .utils import ScenarioInputs, DerivedResults, EngineConstants, DEFAULT_CONSTANTS, DEFAULTS, clamp
from .units import UnitConverter, UNITS, get_currency
from .pathways import PathwayId, get_pathway
from .equipment import scale_equipment_costs
from .finance import (annual_saf_gallons, electricity_mwh_per_year, annual_electricity_cost,
                      electricity_cost_per_gal, build_cost_components, post_credit_total,
                      amortize_capex, blend)
from .carbon import abatement

logger = logging.getLogger(__name__)

PRESETS = ('Baseline', 'Cheap feedstock', 'High CAPEX', 'High power price', 'Generous credits')

# field -> (low, high); None means unbounded on that side
NUMERIC_BOUNDS: Dict[str, Tuple[Optional[float], Optional[float]]] = {
    'fossil_usd_per_gal': (0.0, None),
    'policy_credit_usd_per_gal': (0.0, None),
    'blend_pct': (0.0, 100.0),
    'feedstock_usd_per_ton': (0.0, None),
    'feedstock_tons_per_ton_saf': (0.0, None),
    'hydrogen_usd_per_kg': (0.0, None),
    'hydrogen_kg_per_ton_saf': (0.0, None),
    'co2_usd_per_ton': (0.0, None),
    'co2_tons_per_ton_saf': (0.0, None),
    'chemicals_usd_per_gal': (0.0, None),
    'om_usd_per_gal': (0.0, None),
    'logistics_usd_per_gal': (0.0, None),
    'plant_size_kton_per_year': (1.0, None),
    'reference_size_kton_per_year': (1.0, None),
    'base_electricity_mwh_per_year': (0.0, None),
    'electricity_usd_per_kwh': (0.0, None),
    'equip_scale_exponent': (DEFAULT_CONSTANTS.min_scale_exponent, DEFAULT_CONSTANTS.max_scale_exponent),
    'fossil_ci_kg_per_gal': (0.0, None),
    'transport_add_kg_per_gal': (0.0, None),
    'user_adj_kg_per_gal': (None, None),
    'ptl_grid_kg_per_kwh': (0.0, None),
    'ptl_kwh_per_gal': (0.0, None),
}

# must stay strictly positive; non-positive input is rejected
POSITIVE_FIELDS = ('fx_rate', 'density_kg_per_l')

# changing any of these regenerates the equipment cost set
EQUIPMENT_DRIVERS = ('plant_size_kton_per_year', 'reference_size_kton_per_year',
                     'equip_scale_exponent', 'base_electricity_mwh_per_year')


@dataclass(frozen=True)
class PathwaySelection:
    equipment_costs: Dict[str, float]
    electricity_mwh: float
    co2_price: float


def preset_overrides(name: str) -> Dict[str, Any]:
    """Field values a named preset writes into the scenario."""
    if name == 'Baseline':
        return {
            'feedstock_usd_per_ton': DEFAULTS['feedstock_usd_per_ton'],
            'co2_usd_per_ton': 150.0,
            'hydrogen_usd_per_kg': DEFAULTS['hydrogen_usd_per_kg'],
            'chemicals_usd_per_gal': DEFAULTS['chemicals_usd_per_gal'],
            'om_usd_per_gal': DEFAULTS['om_usd_per_gal'],
            'logistics_usd_per_gal': DEFAULTS['logistics_usd_per_gal'],
            'policy_credit_usd_per_gal': DEFAULTS['policy_credit_usd_per_gal'],
            'electricity_usd_per_kwh': DEFAULTS['electricity_usd_per_kwh'],
        }
    if name == 'Cheap feedstock':
        return {
            'feedstock_usd_per_ton': DEFAULTS['feedstock_usd_per_ton'] * 0.75,
            'co2_usd_per_ton': 120.0,
        }
    if name == 'High CAPEX':
        # CAPEX already follows the current equipment costs
        return {}
    if name == 'High power price':
        return {'electricity_usd_per_kwh': 0.14}
    if name == 'Generous credits':
        return {'policy_credit_usd_per_gal': 1.25}
    raise ValueError(f"Unknown preset '{name}', expected one of {PRESETS}")


def default_equipment_costs(p: ScenarioInputs, constants: EngineConstants = DEFAULT_CONSTANTS) -> Dict[str, float]:
    pathway = get_pathway(p.pathway)
    return scale_equipment_costs(pathway.equipment_usd, p.plant_size_kton_per_year,
                                 p.reference_size_kton_per_year, p.equip_scale_exponent,
                                 electricity_mwh_per_year(p), constants)


def compute_all(p: ScenarioInputs, equipment_costs: Mapping[str, float],
                constants: EngineConstants = DEFAULT_CONSTANTS) -> DerivedResults:
    """Every derived value of a scenario, computed from scratch."""
    gallons = annual_saf_gallons(p, constants)
    components, total_pre = build_cost_components(p, constants)
    total_post = post_credit_total(total_pre, p.policy_credit_usd_per_gal)
    equip_total, debt_service, capex_per_gal = amortize_capex(equipment_costs, gallons, constants)
    blended, premium_pct = blend(total_post, p.fossil_usd_per_gal, p.blend_pct)
    lca = abatement(p, total_post)
    return DerivedResults(
        pathway=p.pathway,
        components=components,
        total_pre_credit=total_pre,
        total_post_credit=total_post,
        total_equipment_cost=equip_total,
        annual_debt_service=debt_service,
        capex_per_gal=capex_per_gal,
        electricity_mwh_per_year=electricity_mwh_per_year(p),
        annual_electricity_cost=annual_electricity_cost(p),
        electricity_per_gal=electricity_cost_per_gal(p, constants),
        annual_saf_gallons=gallons,
        blended_usd_per_gal=blended,
        blended_premium_pct=premium_pct,
        base_ci=lca.base_ci,
        ptl_addon_ci=lca.ptl_addon_ci,
        saf_ci=lca.saf_ci,
        abatement_kg_per_gal=lca.abatement_kg_per_gal,
        saf_premium_usd_per_gal=lca.saf_premium_usd_per_gal,
        abatement_cost_per_tonne=lca.abatement_cost_per_tonne,
        equipment_costs=dict(equipment_costs),
    )


def _to_number(value) -> Optional[float]:
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return number if np.isfinite(number) else None


class Scenario:
    """Mutable scenario state: the current inputs plus the editable equipment costs.

    Every transition builds a complete new ScenarioInputs and swaps it in
    with one assignment.
    """

    def __init__(self, inputs: ScenarioInputs = None, constants: EngineConstants = DEFAULT_CONSTANTS):
        self.constants = constants
        if inputs is None:
            self._inputs = ScenarioInputs()
            self._equipment = {}
            self.select_pathway(self._inputs.pathway)
        else:
            get_pathway(inputs.pathway)
            self._inputs = inputs
            self._equipment = default_equipment_costs(inputs, constants)

    @property
    def inputs(self) -> ScenarioInputs:
        return self._inputs

    @property
    def equipment_costs(self) -> Dict[str, float]:
        return dict(self._equipment)

    @property
    def converter(self) -> UnitConverter:
        return UnitConverter.for_inputs(self._inputs, self.constants)

    def compute(self) -> DerivedResults:
        logger.debug('Recomputing scenario for %s', self._inputs.pathway)
        return compute_all(self._inputs, self._equipment, self.constants)

    def _commit(self, inputs: ScenarioInputs, rescale: bool):
        equipment = default_equipment_costs(inputs, self.constants) if rescale else self._equipment
        self._inputs, self._equipment = inputs, equipment

    def select_pathway(self, pathway) -> PathwaySelection:
        pw = get_pathway(pathway)
        co2 = pw.default_co2_usd_per_ton
        inputs = replace(
            self._inputs,
            pathway=pw.id.value,
            base_electricity_mwh_per_year=pw.electricity_mwh_per_year,
            co2_usd_per_ton=co2 if co2 is not None else self._inputs.co2_usd_per_ton,
        )
        self._commit(inputs, rescale=True)
        logger.info('Selected pathway %s (%d equipment items)', pw.id.value, len(self._equipment))
        return PathwaySelection(
            equipment_costs=self.equipment_costs,
            electricity_mwh=electricity_mwh_per_year(self._inputs),
            co2_price=self._inputs.co2_usd_per_ton,
        )

    def apply_preset(self, name: str) -> ScenarioInputs:
        overrides = preset_overrides(name)
        self._commit(replace(self._inputs, preset=name, **overrides), rescale=False)
        logger.info('Applied preset %s: %s', name, overrides or 'no changes')
        return self._inputs

    def set_field(self, name: str, value) -> ScenarioInputs:
        if name == 'pathway':
            self.select_pathway(value)
            return self._inputs
        if name == 'preset':
            return self.apply_preset(value)
        if name == 'currency':
            currency = get_currency(value)
            if currency.code == self._inputs.currency:
                return self._inputs
            self._commit(replace(self._inputs, currency=currency.code, fx_rate=currency.default_fx), rescale=False)
            return self._inputs
        if name == 'unit':
            if value not in UNITS:
                raise ValueError(f"Unknown unit '{value}', expected one of {UNITS}")
            self._commit(replace(self._inputs, unit=value), rescale=False)
            return self._inputs
        if name == 'electricity_mwh_per_year':
            return self._set_electricity(value)
        if name in POSITIVE_FIELDS:
            number = _to_number(value)
            if number is None or number <= 0:
                logger.warning('Ignoring %s=%r, a positive number is required', name, value)
                return self._inputs
            self._commit(replace(self._inputs, **{name: number}), rescale=False)
            return self._inputs
        if name not in NUMERIC_BOUNDS:
            known = sorted(f.name for f in fields(ScenarioInputs))
            raise ValueError(f"Unknown scenario field '{name}', expected one of {known}")

        number = _to_number(value)
        if number is None:
            logger.warning('Ignoring non-numeric %s=%r', name, value)
            return self._inputs
        low, high = NUMERIC_BOUNDS[name]
        if name == 'equip_scale_exponent':
            low, high = self.constants.min_scale_exponent, self.constants.max_scale_exponent
        clamped = clamp(number, low, high)
        if clamped != number:
            logger.warning('Clamped %s from %s to %s', name, number, clamped)
        changed = clamped != getattr(self._inputs, name)
        self._commit(replace(self._inputs, **{name: clamped}), rescale=changed and name in EQUIPMENT_DRIVERS)
        return self._inputs

    def _set_electricity(self, value) -> ScenarioInputs:
        # a manual demand entry is stored back as the reference-size baseline
        number = _to_number(value)
        if number is None:
            logger.warning('Ignoring non-numeric electricity_mwh_per_year=%r', value)
            return self._inputs
        mwh = max(0.0, number)
        if mwh != number:
            logger.warning('Clamped electricity_mwh_per_year from %s to %s', number, mwh)
        p = self._inputs
        if p.plant_size_kton_per_year > 0:
            base = mwh / p.plant_size_kton_per_year * p.reference_size_kton_per_year
        else:
            base = mwh
        self._commit(replace(p, base_electricity_mwh_per_year=base), rescale=True)
        return self._inputs

    def set_equipment_cost(self, item: str, value) -> Dict[str, float]:
        if item == self.constants.electrolyzer_item:
            logger.warning('%s cost is derived from electricity demand and cannot be edited', item)
            return self.equipment_costs
        if item not in self._equipment:
            logger.warning('Ignoring unknown equipment item %r for %s', item, self._inputs.pathway)
            return self.equipment_costs
        number = _to_number(value)
        if number is None:
            logger.warning('Ignoring non-numeric cost for %s: %r', item, value)
            return self.equipment_costs
        equipment = dict(self._equipment)
        equipment[item] = max(0.0, number)
        self._equipment = equipment
        return self.equipment_costs


def default_scenario(pathway=PathwayId.NOVEL_PTL_ELECTROLYZER, preset: str = 'Baseline',
                     constants: EngineConstants = DEFAULT_CONSTANTS) -> Scenario:
    s = Scenario(constants=constants)
    s.select_pathway(pathway)
    s.apply_preset(preset)
    return s
