
import logging
from dataclasses import dataclass
from typing import List
import numpy as np
from .scenario import Scenario

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckResult:
    name: str
    passed: bool
    detail: str = ''


def run_self_checks(scenario: Scenario, sample_usd_per_gal: float = 12.34) -> List[CheckResult]:
    """Consistency checks over the scenario's current state."""
    results = scenario.compute()
    conv = scenario.converter

    rt = conv.from_display(conv.to_display(sample_usd_per_gal))
    component_sum = sum(c.usd_per_gal for c in results.components)
    checks = [
        CheckResult('Round-trip conversion', bool(np.isclose(rt, sample_usd_per_gal, rtol=1e-9, atol=0)), f'{rt}'),
        CheckResult('Abatement non-negative', results.abatement_kg_per_gal >= 0),
        CheckResult('Production cost sum matches', abs(results.total_pre_credit - component_sum) < 0.01,
                    f'{results.total_pre_credit:.2f} vs {component_sum:.2f}'),
    ]
    for c in checks:
        if c.passed:
            logger.info('PASS %s%s', c.name, f': {c.detail}' if c.detail else '')
        else:
            logger.error('FAIL %s%s', c.name, f': {c.detail}' if c.detail else '')
    return checks
