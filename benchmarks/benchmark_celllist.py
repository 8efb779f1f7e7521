# This source code is part of the Linkcell package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import numpy as np
import pytest
import linkcell

N_POINTS = 100_000
BOX_SIZE = 100.0
CELL_SIDE = 5.0


@pytest.fixture(scope="module")
def points():
    rng = np.random.default_rng(0)
    return rng.uniform(0, BOX_SIZE, size=(N_POINTS, 3))


@pytest.fixture(scope="module")
def cell_list(points):
    return linkcell.SpatialCellList(
        points, (0, 0, 0), (BOX_SIZE,) * 3, CELL_SIDE
    )


@pytest.mark.benchmark
def benchmark_push():
    """
    Fill a bucket index item by item.
    """
    index = linkcell.BucketIndex()
    for item_id in range(N_POINTS):
        index.push(item_id % 1000, item_id)


@pytest.mark.benchmark
def benchmark_build(points):
    """
    Bin random points into a cell list.
    """
    linkcell.SpatialCellList(points, (0, 0, 0), (BOX_SIZE,) * 3, CELL_SIDE)


@pytest.mark.benchmark
def benchmark_iter_cells(cell_list):
    """
    Iterate over all points of all cells.
    """
    for _, cell_points in cell_list.iter_cells():
        for _ in cell_points:
            pass
