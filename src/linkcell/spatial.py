# This source code is part of the Linkcell package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Binning of 3D points into the cells of a uniform grid.
"""

__name__ = "linkcell"
__author__ = "The Linkcell contributors"
__all__ = ["SpatialCellList"]

import logging
import numpy as np
from linkcell.bucket import BucketIndex
from linkcell.point import as_coord, bounding_box, coord_of


class SpatialCellList:
    """
    A cell list sorts 3D points into the cubic cells of a uniform grid,
    so that all points in a cell can be iterated efficiently.

    This is the classic data structure to reduce the cost of finding
    all interacting pairs of particles from :math:`O(n^2)` to
    :math:`O(n)`: only points in the same or in adjacent cells need to
    be checked.

    The grid spans the box between `box_min` and `box_max`.
    The number of cells along each axis is
    :math:`n = \\lfloor (max - min) / side \\rfloor + 1`, the cell
    index of a coordinate is
    :math:`i = \\lfloor (coord - min) / side \\rfloor` and the
    *cell key* of a point is the flattened index
    :math:`i_x + i_y n_x + i_z n_x n_y`.
    Hence, a point exactly on `box_min` has the key ``0`` and a point
    exactly on `box_max` is placed into the last cell of the grid.

    The cell keys are computed only once, from the coordinates at the
    time of construction.
    The cell list only references the points, it neither copies them
    nor tracks later changes of their coordinates.

    Parameters
    ----------
    points : ndarray, shape=(n,3) or sequence of Point3D or sequence of array-like
        The points to be binned.
        The returned point references are taken from this object.
    box_min, box_max : Point3D or array-like, shape=(3,)
        The lower and upper corner of the box the grid is spanned over.
    cell_side : float
        The edge length of each cubic cell.

    Notes
    -----
    No bounds validation is performed:
    points outside the box get keys outside the grid.
    Points below `box_min` get negative flattened indices, which
    silently wrap around to very large unsigned keys.
    A `cell_side` of zero results in undefined keys.

    Besides the underlying :class:`BucketIndex`, the cell list keeps the
    cell key of each point, which requires :math:`O(n)` memory.
    If `points` is not already a floating point :class:`ndarray`, its
    coordinates are also converted into a temporary array during
    construction.

    Examples
    --------

    >>> points = [
    ...     (2, 2, 1), (2, 8, 1), (5, 5, 1), (5, 5, -1),
    ...     (6, 3, -1), (6, 7, 0), (7, 4, 0), (7, 9, 0)
    ... ]
    >>> cell_list = SpatialCellList.from_points(points, cell_side=4.0)
    >>> print(cell_list.cell_counts)
    (2, 2, 1)
    >>> cell_key = cell_list.get_cell_key((5, 5, 1))
    >>> print(cell_key)
    0
    >>> for point in cell_list.iter_cell_points(cell_key):
    ...     print(point)
    (5, 5, -1)
    (5, 5, 1)
    (2, 2, 1)
    >>> print(cell_list.iter_cell_points(5))
    None
    """

    def __init__(self, points, box_min, box_max, cell_side):
        self._points = points
        coord = as_coord(points)
        dtype = coord.dtype
        self._box_min = coord_of(box_min).astype(dtype, copy=False)
        self._box_max = coord_of(box_max).astype(dtype, copy=False)
        self._cell_side = dtype.type(cell_side)

        extent = (self._box_max - self._box_min) / self._cell_side
        # One more cell than the extent covers,
        # so that points on 'box_max' fall into the last cell
        self._cell_counts = np.floor(extent).astype(np.int64) + 1

        self._cell_keys = self._compute_keys(coord)
        self._cell_keys.flags.writeable = False
        self._index = BucketIndex.from_keys(self._cell_keys)

        logging.debug(
            f"Binned {len(coord)} points into {len(self._index)} populated "
            f"cells of a {'x'.join(str(n) for n in self.cell_counts)} grid"
        )

    @classmethod
    def from_points(cls, points, cell_side):
        """
        Create a :class:`SpatialCellList` whose box is the bounding box
        of the given points.

        Parameters
        ----------
        points : ndarray, shape=(n,3) or sequence of Point3D or sequence of array-like
            The points to be binned.
            Must contain at least one point.
        cell_side : float
            The edge length of each cubic cell.

        Returns
        -------
        cell_list : SpatialCellList
            The cell list.
        """
        box_min, box_max = bounding_box(points)
        return cls(points, box_min, box_max, cell_side)

    @property
    def points(self):
        """
        The binned points, as given in the constructor.
        """
        return self._points

    @property
    def box_min(self):
        """
        ndarray, shape=(3,) : The lower corner of the box.
        """
        return self._box_min.copy()

    @property
    def box_max(self):
        """
        ndarray, shape=(3,) : The upper corner of the box.
        """
        return self._box_max.copy()

    @property
    def cell_side(self):
        """
        float : The edge length of each cubic cell.
        """
        return float(self._cell_side)

    @property
    def cell_counts(self):
        """
        tuple of int : The number of cells along the *x*, *y* and *z*
        axis.
        """
        return tuple(int(n) for n in self._cell_counts)

    @property
    def cell_keys(self):
        """
        ndarray, dtype=uint64, shape=(n,) : The cell key of each point.
        Read-only.
        """
        return self._cell_keys

    def get_cell_key(self, coord):
        """
        Get the key of the cell a coordinate falls into.

        The coordinate does not need to be one of the binned points.

        Parameters
        ----------
        coord : Point3D or array-like, shape=(3,)
            The coordinate.

        Returns
        -------
        cell_key : int
            The cell key.
        """
        coord = coord_of(coord).astype(self._box_min.dtype, copy=False)
        return int(self._compute_keys(coord[np.newaxis, :])[0])

    def iter_cell_points(self, cell_key):
        """
        Iterate over all points in a cell.

        Parameters
        ----------
        cell_key : int
            The key of the cell.

        Returns
        -------
        points : generator or None
            A new generator over the points in the cell, most recently
            inserted point first.
            The points are the original objects (or views for an
            :class:`ndarray`) taken from :attr:`points`.
            ``None``, if the cell contains no point.
        """
        chain = self._index.iter_cell(cell_key)
        if chain is None:
            return None
        points = self._points
        return (points[item_id] for item_id in chain)

    def iter_cells(self):
        """
        Iterate over all cells that contain at least one point.

        The order of the cells is not specified.

        Yields
        ------
        cell_key : int
            The key of the cell.
        points : generator
            A generator over the points in the cell, as returned by
            :meth:`iter_cell_points()`.
        """
        for cell_key in self._index.cell_keys():
            yield cell_key, self.iter_cell_points(cell_key)

    def __len__(self):
        return len(self._index)

    def __repr__(self):
        return (
            f"{type(self).__name__}(points={len(self._cell_keys)}, "
            f"cells={len(self)}, cell_counts={self.cell_counts})"
        )

    def _compute_keys(self, coord):
        cell_indices = np.floor(
            (coord - self._box_min) / self._cell_side
        ).astype(np.int64)
        n_x, n_y, _ = self._cell_counts
        keys = (
            cell_indices[:, 0]
            + cell_indices[:, 1] * n_x
            + cell_indices[:, 2] * n_x * n_y
        )
        # Negative keys wrap around
        return keys.astype(np.uint64)
