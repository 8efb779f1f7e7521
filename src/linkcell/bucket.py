# This source code is part of the Linkcell package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
The generic linked-cell engine, that groups integer item identifiers
by an arbitrary integer cell key.
"""

__name__ = "linkcell"
__author__ = "The Linkcell contributors"
__all__ = ["BucketIndex"]

from numbers import Integral
import numpy as np
from linkcell.error import CapacityOverflowError

# Largest number of chain storage slots, whose total size in bytes can
# still be addressed on this platform
_MAX_STORAGE_SIZE = np.iinfo(np.intp).max // np.dtype(np.intp).itemsize


class BucketIndex:
    """
    A bucket index (cell list) maps integer cell keys to chains of
    integer item identifiers.

    The index does not store the items themselves, but only their
    identifiers, i.e. the positions of the items in an external
    collection.
    All chains are encoded in a single flat array:
    the slot of an item contains the position of the item that was
    pushed to the same cell before it, and a separate mapping holds the
    position of the most recently pushed item for each cell.
    Hence, inserting an item is an amortized :math:`O(1)` operation
    and no per-item object is allocated.

    Item identifiers are stored shifted by one, since position ``0``
    of the chain storage marks the end of a chain.
    As a consequence, the items of a cell are always iterated in
    reverse insertion order.

    The index is meant to be built once and to be read afterwards:
    there is no way to remove an item or to move it to another cell.
    Each item identifier must be pushed at most once.

    Examples
    --------

    >>> index = BucketIndex()
    >>> for item_id, cell_key in enumerate([3, 1, 3, 3, 7]):
    ...     index.push(cell_key, item_id)
    >>> print(list(index.iter_cell(3)))
    [3, 2, 0]
    >>> print(list(index.iter_cell(7)))
    [4]
    >>> print(index.iter_cell(5))
    None
    >>> print(len(index))
    3
    """

    def __init__(self):
        # Maps each cell key to the chain position of its latest item
        self._heads = {}
        self._links = np.zeros(0, dtype=np.intp)
        self._size = 0

    @classmethod
    def from_keys(cls, cell_keys):
        """
        Create a :class:`BucketIndex` from the cell keys of all items
        in a collection.

        The item at position *i* of the collection is pushed to the
        cell ``cell_keys[i]``.
        In contrast to repeated calls of :meth:`push()`, the chain
        storage is allocated only once.

        Parameters
        ----------
        cell_keys : array-like of int, shape=(n,)
            The non-negative cell key for each item.
            Python integers beyond the 64 bit range are accepted as well.

        Returns
        -------
        index : BucketIndex
            The filled index.

        Examples
        --------

        >>> index = BucketIndex.from_keys([0, 2, 0, 2, 2])
        >>> print(list(index.iter_cell(2)))
        [4, 3, 1]
        >>> print(index.storage_size)
        6
        """
        try:
            cell_keys = np.asarray(cell_keys)
        except OverflowError:
            cell_keys = np.array(list(cell_keys), dtype=object)
        if cell_keys.ndim != 1:
            raise IndexError(
                f"Expected one-dimensional cell keys, "
                f"but got {cell_keys.ndim} dimensions"
            )
        if cell_keys.dtype == object:
            # Python integers beyond the range of 64 bit integers
            cell_keys = np.array(
                [_as_index(key, "Cell key") for key in cell_keys], dtype=object
            )
        elif len(cell_keys) > 0:
            if not np.issubdtype(cell_keys.dtype, np.integer):
                raise TypeError(
                    f"Cell keys must be integers, not '{cell_keys.dtype}'"
                )
            if np.any(cell_keys < 0):
                raise ValueError("Cell keys must be non-negative")

        index = cls()
        index._reserve(len(cell_keys) + 1)
        for item_id, cell_key in enumerate(cell_keys.tolist()):
            index._link(cell_key, item_id)
        return index

    @property
    def storage_size(self):
        """
        int : The logical length of the chain storage, i.e. the largest
        item identifier pushed so far plus two.
        ``0`` for an empty index.
        """
        return self._size

    def push(self, cell_key, item_id):
        """
        Add an item to a cell.

        Parameters
        ----------
        cell_key : int
            The non-negative key of the cell the item belongs to.
        item_id : int
            The non-negative identifier of the item.

        Raises
        ------
        CapacityOverflowError
            If the chain storage required for `item_id` exceeds the
            addressable size of the platform or cannot be allocated.
        """
        cell_key = _as_index(cell_key, "Cell key")
        item_id = _as_index(item_id, "Item identifier")
        if item_id > _MAX_STORAGE_SIZE - 2:
            raise CapacityOverflowError(
                f"Item identifier {item_id} requires a chain storage "
                f"larger than the maximum size of {_MAX_STORAGE_SIZE}"
            )
        self._link(cell_key, item_id)

    def iter_cell(self, cell_key):
        """
        Iterate over the identifiers of all items in a cell.

        The items are yielded in reverse insertion order, i.e. the item
        that was pushed last comes first.

        Parameters
        ----------
        cell_key : int
            The key of the cell.

        Returns
        -------
        items : generator of int or None
            A new generator over the item identifiers of the cell.
            ``None``, if no item was ever pushed to this cell.
        """
        head = self._heads.get(cell_key)
        if head is None:
            return None
        return self._iter_chain(head)

    def get_items(self, cell_key):
        """
        Get the identifiers of all items in a cell as array.

        Parameters
        ----------
        cell_key : int
            The key of the cell.

        Returns
        -------
        items : ndarray, dtype=int, shape=(k,)
            The item identifiers in reverse insertion order.
            Empty, if no item was ever pushed to this cell.
        """
        chain = self.iter_cell(cell_key)
        if chain is None:
            return np.zeros(0, dtype=np.int64)
        return np.fromiter(chain, dtype=np.int64)

    def cell_keys(self):
        """
        Iterate over the keys of all cells that contain at least one
        item.

        The order of the keys is not specified.

        Returns
        -------
        cell_keys : iterator of int
            The populated cell keys.
        """
        return iter(self._heads)

    def __len__(self):
        return len(self._heads)

    def __contains__(self, cell_key):
        return cell_key in self._heads

    def __repr__(self):
        return (
            f"{type(self).__name__}"
            f"(cells={len(self)}, storage_size={self.storage_size})"
        )

    def _link(self, cell_key, item_id):
        pos = item_id + 1
        if pos + 1 > len(self._links):
            self._reserve(max(pos + 1, min(2 * len(self._links), _MAX_STORAGE_SIZE)))
        self._links[pos] = self._heads.get(cell_key, 0)
        self._heads[cell_key] = pos
        self._size = max(self._size, pos + 1)

    def _iter_chain(self, pos):
        while pos != 0:
            yield pos - 1
            pos = int(self._links[pos])

    def _reserve(self, capacity):
        if capacity <= len(self._links):
            return
        try:
            links = np.zeros(capacity, dtype=np.intp)
        except (MemoryError, ValueError) as e:
            raise CapacityOverflowError(
                f"Cannot allocate a chain storage with {capacity} slots"
            ) from e
        links[: len(self._links)] = self._links
        self._links = links


def _as_index(value, name):
    if not isinstance(value, Integral) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, not '{type(value).__name__}'")
    value = int(value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, but got {value}")
    return value
