import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from fieldsim.data.grid import GridGeometry


class SequenceRng:
    """Stand-in for numpy's Generator that replays fixed draws."""

    def __init__(self, values):
        self.values = list(values)

    def _next(self):
        return self.values.pop(0)

    def random(self, size=None):
        if size is None:
            return self._next()
        return np.full(size, self._next())

    def integers(self, high):
        return int(self._next())


@pytest.fixture
def geometry():
    return GridGeometry()


@pytest.fixture
def small_geometry():
    # Odd dimensions put a cell exactly on the vortex center
    return GridGeometry(rows=5, cols=5, cell_size=25)


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def sequence_rng():
    return SequenceRng
