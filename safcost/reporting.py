
from typing import Mapping
import pandas as pd
from .utils import DerivedResults
from .units import UnitConverter


def components_frame(results: DerivedResults, converter: UnitConverter = None) -> pd.DataFrame:
    """Cost components in descending share order, optionally in display units."""
    df = pd.DataFrame(
        [{'component': c.name, 'usd_per_gal': c.usd_per_gal, 'share': c.share} for c in results.components],
        columns=['component', 'usd_per_gal', 'share'],
    )
    df['percent'] = df['share'] * 100.0
    if converter is not None:
        df['display_per_unit'] = df['usd_per_gal'].map(converter.to_display)
    return df


def equipment_frame(costs: Mapping[str, float]) -> pd.DataFrame:
    df = pd.DataFrame({'item': list(costs.keys()), 'usd': [float(v) for v in costs.values()]})
    total = df['usd'].sum()
    df['share'] = df['usd'] / total if total > 0 else 0.0
    return df


def summary_frame(results: DerivedResults) -> pd.DataFrame:
    rows = [
        ('Total production cost (pre-credit)', results.total_pre_credit, 'USD/gal'),
        ('Total after credits', results.total_post_credit, 'USD/gal'),
        ('CAPEX per gallon', results.capex_per_gal, 'USD/gal'),
        ('Electricity per gallon', results.electricity_per_gal, 'USD/gal'),
        ('Blended price', results.blended_usd_per_gal, 'USD/gal'),
        ('Blended premium', results.blended_premium_pct, '%'),
        ('Total equipment cost', results.total_equipment_cost, 'USD'),
        ('Annual debt service', results.annual_debt_service, 'USD/yr'),
        ('Annual electricity cost', results.annual_electricity_cost, 'USD/yr'),
        ('SAF carbon intensity', results.saf_ci, 'kg CO2e/gal'),
        ('Abatement', results.abatement_kg_per_gal, 'kg CO2e/gal'),
        ('Abatement cost', results.abatement_cost_per_tonne, 'USD/t CO2e'),
    ]
    return pd.DataFrame(rows, columns=['metric', 'value', 'unit'])
