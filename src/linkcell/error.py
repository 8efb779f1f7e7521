# This source code is part of the Linkcell package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains all possible errors and warnings of *Linkcell*.
"""

__name__ = "linkcell"
__author__ = "The Linkcell contributors"
__all__ = [
    "CapacityOverflowError",
    "InvalidFileError",
    "EmptyCellListingWarning",
]


class CapacityOverflowError(OverflowError):
    """
    Indicates that an item identifier is too large to be stored in a
    :class:`BucketIndex`, as the required chain storage would exceed
    the addressable size of the platform.
    """

    pass


class InvalidFileError(Exception):
    """
    Indicates that the file is not suitable for the requested action,
    either because the file does not contain the required data or
    because the file is malformed.
    """

    pass


class EmptyCellListingWarning(UserWarning):
    """
    Indicates that a cell listing file does not contain any points.
    """

    pass
