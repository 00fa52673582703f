import pandas as pd
import pytest

from safcost.reporting import components_frame, equipment_frame, summary_frame
from safcost.units import UnitConverter


def test_components_frame(hefa):
    df = components_frame(hefa.compute())
    assert list(df.columns) == ['component', 'usd_per_gal', 'share', 'percent']
    assert len(df) == 6
    assert df['share'].is_monotonic_decreasing
    assert df['percent'].sum() == pytest.approx(100.0)


def test_components_frame_in_display_units(hefa):
    conv = UnitConverter(fx_rate=0.86, unit='L')
    df = components_frame(hefa.compute(), converter=conv)
    row = df.iloc[0]
    assert row['display_per_unit'] == pytest.approx(row['usd_per_gal'] * 0.86 / 3.785411784)


def test_equipment_frame(hefa):
    df = equipment_frame(hefa.equipment_costs)
    assert list(df['item']) == list(hefa.equipment_costs)
    assert df['share'].sum() == pytest.approx(1.0)
    assert df['usd'].sum() == hefa.compute().total_equipment_cost


def test_summary_frame_keeps_missing_abatement_cost(hefa):
    hefa.set_field('fossil_ci_kg_per_gal', 1.0)
    df = summary_frame(hefa.compute()).set_index('metric')
    assert df.loc['Abatement', 'value'] == 0.0
    assert pd.isna(df.loc['Abatement cost', 'value'])
    assert df.loc['Total after credits', 'unit'] == 'USD/gal'
