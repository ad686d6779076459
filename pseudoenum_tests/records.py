"""seeded fake records for the test modules, so every run sees the same data."""

from typing import Any, Dict, List, Optional

import numpy as np
from faker import Faker

DEPARTMENTS = ['eng', 'sales', 'hr', 'marketing']


class RecordFactory:
    """builds people records from faker providers and a numpy rng."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            Faker.seed(seed)
            self._rng = np.random.default_rng(seed)
        else:
            self._rng = np.random.default_rng()

    def person(self, person_id: int) -> Dict[str, Any]:
        # numpy's choice returns numpy scalars, convert to native python types
        department = self._rng.choice(DEPARTMENTS).item()
        return {
            'id': person_id,
            'name': self._fake.first_name(),
            'age': self._fake.pyint(min_value=18, max_value=65),
            'salary': int(self._rng.integers(30000, 150000)),
            'department': department,
            'active': self._fake.pybool(),
        }

    def people(self, count: int) -> List[Dict[str, Any]]:
        return [self.person(i) for i in range(1, count + 1)]


def people(count: int, seed: int = 42) -> List[Dict[str, Any]]:
    """count records with ids 1..count, in id order."""
    return RecordFactory(seed).people(count)
