# This source code is part of the Linkcell package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A plain text listing of the points in a cell list, suitable for
external visualization.
"""

__name__ = "linkcell"
__author__ = "The Linkcell contributors"
__all__ = ["CellListingFile"]

import io
import warnings
from os import PathLike
import numpy as np
from linkcell.error import EmptyCellListingWarning, InvalidFileError
from linkcell.point import coord_of


class CellListingFile:
    """
    This class represents a cell listing file.

    The first line of the file contains the number of points, followed
    by an empty line.
    Each of the remaining lines describes one point by its cell key and
    its *x*, *y* and *z* coordinate, separated by tabs.
    This is similar to the *XYZ* format, with the cell key in place of
    the element, so that a viewer can color the points by their cell.

    Attributes
    ----------
    lines : list of str
        The lines of text in the file.

    Examples
    --------

    >>> import io
    >>> cell_list = SpatialCellList.from_points(
    ...     [(0, 0, 0), (1, 1, 1), (9, 9, 9)], cell_side=5.0
    ... )
    >>> listing = CellListingFile()
    >>> listing.set_cell_list(cell_list)
    >>> file = io.StringIO()
    >>> listing.write(file)
    >>> listing = CellListingFile.read(io.StringIO(file.getvalue()))
    >>> cells = listing.get_cells()
    >>> print(cells[0])
    [[1. 1. 1.]
     [0. 0. 0.]]
    >>> print(cells[7])
    [[9. 9. 9.]]
    """

    def __init__(self):
        self.lines = []

    @classmethod
    def read(cls, file):
        """
        Read a cell listing file.

        Parameters
        ----------
        file : file-like object or str
            The file to be read.
            Alternatively a file path can be supplied.

        Returns
        -------
        file_object : CellListingFile
            The parsed file.
        """
        # File name
        if _is_open_compatible(file):
            with open(file, "r") as f:
                lines = f.read().splitlines()
        # File object
        else:
            if not _is_text(file):
                raise TypeError("A file opened in 'text' mode is required")
            lines = file.read().splitlines()
        file_object = cls()
        file_object.lines = lines
        return file_object

    def write(self, file):
        """
        Write the contents of this object into a file
        (or file-like object).

        Parameters
        ----------
        file : file-like object or str
            The file to be written to.
            Alternatively a file path can be supplied.
        """
        if _is_open_compatible(file):
            with open(file, "w") as f:
                f.write("\n".join(self.lines) + "\n")
        else:
            if not _is_text(file):
                raise TypeError("A file opened in 'text' mode is required")
            file.write("\n".join(self.lines) + "\n")

    def set_cell_list(self, cell_list):
        """
        Fill the file with all points of a cell list.

        Any previous content of the file is replaced.

        Parameters
        ----------
        cell_list : SpatialCellList
            The cell list to be written.
        """
        point_lines = []
        for cell_key, points in cell_list.iter_cells():
            for point in points:
                x, y, z = coord_of(point)
                point_lines.append(f"{cell_key}\t{x}\t{y}\t{z}")
        self.lines = [str(len(point_lines)), ""] + point_lines

    def get_cells(self):
        """
        Get the coordinates of the points in each cell.

        Returns
        -------
        cells : dict of (int -> ndarray, dtype=float, shape=(k,3))
            Maps each cell key to the coordinates of the points in this
            cell, in the order they appear in the file.
        """
        if len(self.lines) == 0:
            warnings.warn("The file is empty", EmptyCellListingWarning)
            return {}

        try:
            n_points = int(self.lines[0])
        except ValueError:
            raise InvalidFileError(
                f"Expected the number of points in the first line, "
                f"but got '{self.lines[0]}'"
            )
        if len(self.lines) < 2 or self.lines[1].strip() != "":
            raise InvalidFileError("Expected an empty second line")
        point_lines = [line for line in self.lines[2:] if line.strip() != ""]
        if len(point_lines) != n_points:
            raise InvalidFileError(
                f"The header states {n_points} points, "
                f"but the file contains {len(point_lines)}"
            )
        if n_points == 0:
            warnings.warn("The file contains no points", EmptyCellListingWarning)

        cells = {}
        for line in point_lines:
            fields = line.split()
            if len(fields) != 4:
                raise InvalidFileError(
                    f"Expected 4 columns, but got {len(fields)} in line '{line}'"
                )
            try:
                cell_key = int(fields[0])
                coord = [float(value) for value in fields[1:]]
            except ValueError:
                raise InvalidFileError(f"Line '{line}' contains invalid values")
            cells.setdefault(cell_key, []).append(coord)
        return {
            cell_key: np.array(coord, dtype=np.float64)
            for cell_key, coord in cells.items()
        }


def _is_open_compatible(file):
    return isinstance(file, (str, bytes, PathLike))


def _is_text(file):
    if isinstance(file, io.TextIOBase):
        return True
    # for file wrappers, e.g. 'TemporaryFile'
    elif hasattr(file, "file") and isinstance(file.file, io.TextIOBase):
        return True
    else:
        return False
