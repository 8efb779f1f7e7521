# This source code is part of the Linkcell package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pytest


@pytest.fixture
def scenario_points():
    """
    A small set of points, whose cells are known:

    ====  ============  ========
    Item  Point         Cell key
    ====  ============  ========
    0     ( 2,  2,  1)  0
    1     ( 2,  8,  1)  2
    2     ( 5,  5,  1)  0
    3     ( 5,  5, -1)  0
    4     ( 6,  3, -1)  1
    5     ( 6,  7,  0)  3
    6     ( 7,  4,  0)  1
    7     ( 7,  9,  0)  3
    ====  ============  ========

    for the bounding box of the points and a cell side of 4.
    """
    return [
        (2.0, 2.0, 1.0), (2.0, 8.0, 1.0), (5.0, 5.0, 1.0), (5.0, 5.0, -1.0),
        (6.0, 3.0, -1.0), (6.0, 7.0, 0.0), (7.0, 4.0, 0.0), (7.0, 9.0, 0.0),
    ]  # fmt: skip
