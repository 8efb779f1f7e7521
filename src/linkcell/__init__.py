# This source code is part of the Linkcell package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This is the top-level package of *Linkcell*.

*Linkcell* provides cell lists (also called linked-cell lists), the
classic acceleration structure of particle simulations:
a fixed collection of items is partitioned into cells, so that all
items sharing a cell can be iterated without scanning the entire
collection.

The :class:`BucketIndex` is the generic part of the structure:
it groups integer item identifiers by arbitrary integer cell keys and
knows nothing about geometry.
The :class:`SpatialCellList` bins 3D points into the cells of a uniform
grid and uses a :class:`BucketIndex` for storage and iteration.
Points can be given as *(n,3)* :class:`ndarray`, as sequences of
3-element sequences or as records with ``x``, ``y`` and ``z``
attributes (:class:`Point3D`).

A :class:`CellListingFile` writes the binned points into a plain text
file for external visualization.
"""

__version__ = "0.1.0"
__name__ = "linkcell"
__author__ = "The Linkcell contributors"

from .error import *
from .bucket import *
from .point import *
from .spatial import *
from .listing import *
