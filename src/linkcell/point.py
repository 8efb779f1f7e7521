# This source code is part of the Linkcell package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Functions for handling the different representations of a 3D point.

A point can be given as any object with three scalar coordinates:
either as sequence of length 3 (e.g. a :class:`tuple`, a :class:`list`
or an :class:`ndarray`) or as record with ``x``, ``y`` and ``z``
attributes (see :class:`Point3D`).
Collections of points can additionally be given as *(n,3)*
:class:`ndarray`.
"""

__name__ = "linkcell"
__author__ = "The Linkcell contributors"
__all__ = ["Point3D", "coord_of", "as_coord", "bounding_box"]

from typing import Protocol, runtime_checkable
import numpy as np


@runtime_checkable
class Point3D(Protocol):
    """
    Any record that exposes its coordinates as ``x``, ``y`` and ``z``
    attributes.

    There is no need to inherit from this class: every object with
    these attributes, e.g. a :func:`dataclasses.dataclass` or a
    :func:`collections.namedtuple`, is a :class:`Point3D`.
    """

    x: float
    y: float
    z: float


def coord_of(point):
    """
    Get the coordinates of a single point.

    Parameters
    ----------
    point : Point3D or array-like, shape=(3,)
        The point.

    Returns
    -------
    coord : ndarray, dtype=float, shape=(3,)
        The *x*, *y* and *z* coordinate of the point.
        The floating point precision of the input is retained.

    Examples
    --------

    >>> from collections import namedtuple
    >>> Atom = namedtuple("Atom", ["x", "y", "z"])
    >>> print(coord_of(Atom(1.0, 2.0, 3.0)))
    [1. 2. 3.]
    >>> print(coord_of([4, 5, 6]))
    [4. 5. 6.]
    """
    if not isinstance(point, np.ndarray) and isinstance(point, Point3D):
        coord = np.array([point.x, point.y, point.z])
    else:
        coord = np.asarray(point)
    coord = _as_float(coord)
    if coord.shape != (3,):
        raise IndexError(
            f"Expected a point with 3 coordinates, but got shape {coord.shape}"
        )
    return coord


def as_coord(points):
    """
    Get the coordinates of a collection of points as a single array.

    Parameters
    ----------
    points : ndarray, shape=(n,3) or sequence of Point3D or sequence of array-like
        The points.
        All points must use the same representation.

    Returns
    -------
    coord : ndarray, dtype=float, shape=(n,3)
        The coordinates of the points.
        If `points` is already a floating point :class:`ndarray` with
        the correct shape, it is returned without a copy.

    Examples
    --------

    >>> coord = as_coord([(0, 1, 2), (3, 4, 5)])
    >>> print(coord)
    [[0. 1. 2.]
     [3. 4. 5.]]
    """
    if isinstance(points, np.ndarray):
        coord = points
    elif len(points) == 0:
        return np.zeros((0, 3), dtype=np.float64)
    else:
        is_record = [
            not isinstance(point, np.ndarray) and isinstance(point, Point3D)
            for point in points
        ]
        if all(is_record):
            coord = np.array([(point.x, point.y, point.z) for point in points])
        elif any(is_record):
            raise TypeError(
                "Records and sequences cannot be mixed in one point collection"
            )
        else:
            try:
                coord = np.asarray(points)
            except ValueError:
                raise IndexError("Each point must have exactly 3 coordinates")
    if coord.ndim == 1 and len(coord) == 0:
        return np.zeros((0, 3), dtype=np.float64)
    coord = _as_float(coord)
    if coord.ndim != 2 or coord.shape[-1] != 3:
        raise IndexError(
            f"Expected points with shape (n,3), but got shape {coord.shape}"
        )
    return coord


def bounding_box(points):
    """
    Get the axis-aligned bounding box of a collection of points.

    Parameters
    ----------
    points : ndarray, shape=(n,3) or sequence of Point3D or sequence of array-like
        The points.
        Must contain at least one point.

    Returns
    -------
    box_min, box_max : ndarray, dtype=float, shape=(3,)
        The component-wise minimum and maximum of the coordinates.

    Examples
    --------

    >>> box_min, box_max = bounding_box([(2, 2, 1), (2, 8, 1), (7, 4, -1)])
    >>> print(box_min)
    [ 2.  2. -1.]
    >>> print(box_max)
    [7. 8. 1.]
    """
    coord = as_coord(points)
    if len(coord) == 0:
        raise ValueError("Cannot compute the bounding box of zero points")
    return np.min(coord, axis=0), np.max(coord, axis=0)


def _as_float(coord):
    if coord.dtype.kind == "f":
        return coord
    if coord.dtype.kind in "biu":
        return coord.astype(np.float64)
    raise TypeError(f"Coordinates must be numeric, not '{coord.dtype}'")
