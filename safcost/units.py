
from dataclasses import dataclass
from typing import Dict
from .utils import EngineConstants, DEFAULT_CONSTANTS


@dataclass(frozen=True)
class Currency:
    code: str
    symbol: str
    default_fx: float  # display units per USD


CURRENCIES: Dict[str, Currency] = {
    'USD': Currency('USD', '$', 1.0),
    'GBP': Currency('GBP', '£', 0.76),
    'EUR': Currency('EUR', '€', 0.86),
    'CNY': Currency('CNY', '¥', 7.12),
}

UNITS = ('gal', 'L', 'kg', 'tonne')


def get_currency(code: str) -> Currency:
    try:
        return CURRENCIES[code]
    except KeyError:
        raise ValueError(f"Unknown currency '{code}', expected one of {sorted(CURRENCIES)}") from None


def unit_factor_to_gal(unit: str, density_kg_per_l: float, constants: EngineConstants = DEFAULT_CONSTANTS) -> float:
    """Amount of the display unit in one canonical gallon.

    price_per_gal = price_per_unit * factor
    """
    kg_per_gal = density_kg_per_l * constants.liters_per_gal
    if unit == 'gal':
        return 1.0
    if unit == 'L':
        return constants.liters_per_gal
    if unit == 'kg':
        return kg_per_gal
    if unit == 'tonne':
        return kg_per_gal / 1000.0
    raise ValueError(f"Unknown unit '{unit}', expected one of {UNITS}")


class UnitConverter:
    """Converts between canonical USD/gal and a display currency per display unit."""

    def __init__(self, fx_rate: float = 1.0, unit: str = 'gal', density_kg_per_l: float = 0.8,
                 constants: EngineConstants = DEFAULT_CONSTANTS):
        self.fx_rate = fx_rate
        self.unit = unit
        self.density_kg_per_l = density_kg_per_l
        self.factor = unit_factor_to_gal(unit, density_kg_per_l, constants)

    @classmethod
    def for_inputs(cls, p, constants: EngineConstants = DEFAULT_CONSTANTS):
        return cls(p.fx_rate, p.unit, p.density_kg_per_l, constants)

    def to_display(self, usd_per_gal: float) -> float:
        return usd_per_gal * self.fx_rate / self.factor

    def from_display(self, display_per_unit: float) -> float:
        return display_per_unit / self.fx_rate * self.factor

    def __repr__(self):
        return f"UnitConverter(fx_rate={self.fx_rate}, unit='{self.unit}', density_kg_per_l={self.density_kg_per_l})"
