# This source code is part of the Linkcell package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import io
import numpy as np
import pytest
import linkcell


def test_file_content(scenario_points):
    """
    Check the header and the column layout of a written listing.
    """
    cell_list = linkcell.SpatialCellList.from_points(scenario_points, 4.0)
    listing = linkcell.CellListingFile()
    listing.set_cell_list(cell_list)

    assert listing.lines[0] == "8"
    assert listing.lines[1] == ""
    assert len(listing.lines) == 2 + 8
    for line in listing.lines[2:]:
        fields = line.split("\t")
        assert len(fields) == 4
        cell_key = int(fields[0])
        coord = tuple(float(value) for value in fields[1:])
        assert cell_list.get_cell_key(coord) == cell_key


@pytest.mark.parametrize("use_path", [False, True])
def test_write_read(tmp_path, scenario_points, use_path):
    """
    Write a listing into a file and check if the cells can be
    recovered from the file.
    """
    cell_list = linkcell.SpatialCellList.from_points(scenario_points, 4.0)
    listing = linkcell.CellListingFile()
    listing.set_cell_list(cell_list)

    if use_path:
        path = tmp_path / "cells.xyz"
        listing.write(path)
        listing = linkcell.CellListingFile.read(path)
    else:
        file = io.StringIO()
        listing.write(file)
        file.seek(0)
        listing = linkcell.CellListingFile.read(file)

    cells = listing.get_cells()
    assert sorted(cells.keys()) == [0, 1, 2, 3]
    for cell_key, coord in cells.items():
        exp_coord = np.array(list(cell_list.iter_cell_points(cell_key)))
        assert np.array_equal(coord, exp_coord)


def test_random_points(tmp_path):
    """
    Write a listing of many random points, as it would be used for
    visualization.
    """
    rng = np.random.default_rng(0)
    points = rng.uniform(-10, 10, size=(1000, 3))
    cell_list = linkcell.SpatialCellList(points, (-10,) * 3, (10,) * 3, 5.0)
    listing = linkcell.CellListingFile()
    listing.set_cell_list(cell_list)
    listing.write(tmp_path / "visualization.xyz")

    cells = linkcell.CellListingFile.read(tmp_path / "visualization.xyz").get_cells()
    assert sum(len(coord) for coord in cells.values()) == len(points)
    for cell_key, coord in cells.items():
        assert np.allclose(coord, points[cell_list.cell_keys == cell_key][::-1])


@pytest.mark.parametrize(
    "lines",
    [
        ["two", "", "0\t1\t2\t3", "0\t1\t2\t3"],
        ["1", "x", "0\t1\t2\t3"],
        ["1"],
        ["2", "", "0\t1\t2\t3"],
        ["1", "", "0\t1\t2"],
        ["1", "", "0\t1\t2\t3\t4"],
        ["1", "", "a\t1\t2\t3"],
        ["1", "", "0\t1\tb\t3"],
    ],
)
def test_invalid_content(lines):
    listing = linkcell.CellListingFile()
    listing.lines = lines
    with pytest.raises(linkcell.InvalidFileError):
        listing.get_cells()


def test_trailing_empty_lines():
    listing = linkcell.CellListingFile.read(io.StringIO("1\n\n5\t1\t2\t3\n\n\n"))
    cells = listing.get_cells()
    assert cells[5].tolist() == [[1, 2, 3]]


@pytest.mark.parametrize("content", ["", "0\n\n"])
def test_empty_file(content):
    listing = linkcell.CellListingFile.read(io.StringIO(content))
    with pytest.warns(linkcell.EmptyCellListingWarning):
        cells = listing.get_cells()
    assert cells == {}


def test_empty_cell_list():
    cell_list = linkcell.SpatialCellList([], (0, 0, 0), (1, 1, 1), 1.0)
    listing = linkcell.CellListingFile()
    listing.set_cell_list(cell_list)
    assert listing.lines == ["0", ""]


def test_binary_file():
    listing = linkcell.CellListingFile()
    with pytest.raises(TypeError):
        linkcell.CellListingFile.read(io.BytesIO(b"0\n\n"))
    with pytest.raises(TypeError):
        listing.write(io.BytesIO())
