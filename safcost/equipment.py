
import logging
from typing import Dict, Mapping
from .utils import EngineConstants, DEFAULT_CONSTANTS, clamp

logger = logging.getLogger(__name__)


def scale_factor(plant_size: float, reference_size: float, exponent: float,
                 constants: EngineConstants = DEFAULT_CONSTANTS) -> float:
    """Six-tenths style scaling law: (S/S0)^e, e bounded to [0.5, 1.0]."""
    if plant_size <= 0 or reference_size <= 0:
        return 1.0
    e = clamp(exponent, constants.min_scale_exponent, constants.max_scale_exponent)
    return (plant_size / reference_size) ** e


def scaled_electricity_mwh(plant_size: float, reference_size: float, base_mwh_per_year: float) -> float:
    # electricity demand is linear in throughput
    if reference_size <= 0:
        return base_mwh_per_year
    return plant_size / reference_size * base_mwh_per_year


def electrolyzer_mw(mwh_per_year: float, constants: EngineConstants = DEFAULT_CONSTANTS) -> float:
    # MWh/yr -> kWh/yr -> average kW -> MW
    return mwh_per_year * 1000.0 / constants.hours_per_year / 1000.0


def electrolyzer_cost(mwh_per_year: float, constants: EngineConstants = DEFAULT_CONSTANTS) -> float:
    """Electrolyzer capacity cost: a fixed price per 5 MW block plus 14% contingency."""
    mw = electrolyzer_mw(mwh_per_year, constants)
    cost = (mw / constants.electrolyzer_block_mw) * constants.electrolyzer_block_usd * constants.electrolyzer_contingency
    return float(round(cost))


def scale_equipment_costs(base_costs: Mapping[str, float], plant_size: float, reference_size: float,
                          exponent: float, mwh_per_year: float,
                          constants: EngineConstants = DEFAULT_CONSTANTS) -> Dict[str, float]:
    """Scale reference-plant equipment costs to the current plant size.

    Every item follows the power law except the electrolyzer, which is sized
    from the plant's annual electricity demand.
    """
    scale = scale_factor(plant_size, reference_size, exponent, constants)
    scaled = {}
    for item, cost in base_costs.items():
        if item == constants.electrolyzer_item:
            scaled[item] = electrolyzer_cost(mwh_per_year, constants)
        else:
            scaled[item] = float(round(cost * scale))
    logger.debug('Scaled %d equipment items by %.4f (size %s vs %s, e=%s)',
                 len(scaled), scale, plant_size, reference_size, exponent)
    return scaled


def total_equipment_cost(costs: Mapping[str, float]) -> float:
    return float(sum(costs.values()))
