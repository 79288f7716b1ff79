"""Unit tests for sparse alive-cell storage."""

import pytest
from ndlife.core.cells import CellSet, as_coordinate


class TestCellSetBasics:
    """Test membership and construction."""

    def test_empty_by_default(self):
        cells = CellSet()
        assert len(cells) == 0
        assert not cells
        assert not cells.contains((0, 0))

    def test_initial_cells(self):
        cells = CellSet([(0, 0), (1, 2)])
        assert len(cells) == 2
        assert cells.contains((1, 2))
        assert (0, 0) in cells

    def test_duplicates_collapse(self):
        """Each coordinate is stored at most once."""
        cells = CellSet([(0, 0), (0, 0), [0, 0]])
        assert len(cells) == 1

    def test_structural_equality(self):
        """Lists and tuples with the same components are the same cell."""
        cells = CellSet([[3, -4, 5]])
        assert cells.contains((3, -4, 5))
        assert [3, -4, 5] in cells
        assert as_coordinate([3, -4, 5]) == (3, -4, 5)

    def test_equality(self):
        assert CellSet([(0, 0), (1, 1)]) == CellSet([(1, 1), (0, 0)])
        assert CellSet([(0, 0)]) == {(0, 0)}
        assert CellSet([(0, 0)]) != CellSet([(0, 1)])


class TestCellSetMutation:
    """Test set/toggle/replace."""

    def test_set_reports_change(self):
        """set() returns True only when membership actually changes."""
        cells = CellSet([(1, 1)])

        assert cells.set((1, 1), False) is True
        assert cells.set((1, 1), False) is False
        assert cells.set((0, 0), True) is True
        assert cells.set((0, 0), True) is False
        assert cells == {(0, 0)}

    def test_toggle(self):
        cells = CellSet([(1, 1)])
        cells.toggle((1, 1))
        cells.toggle((0, 0))
        assert cells == {(0, 0)}

    def test_toggle_twice_restores(self):
        cells = CellSet([(5, 5)])
        cells.toggle((2, 2))
        cells.toggle((2, 2))
        assert cells == {(5, 5)}

    def test_replace_discards_old(self):
        cells = CellSet([(0, 0), (1, 1)])
        cells.replace([(7, 7)])
        assert cells == {(7, 7)}

    def test_replace_copies_input(self):
        """Later edits to the source do not leak into the set."""
        source = {(0, 0)}
        cells = CellSet(source)
        source.add((9, 9))
        assert (9, 9) not in cells

    def test_clear_and_discard(self):
        cells = CellSet([(0, 0), (1, 1)])
        cells.discard((0, 0))
        cells.discard((5, 5))
        assert cells == {(1, 1)}
        cells.clear()
        assert len(cells) == 0


class TestCellSetDifferences:
    """Test lazy set differences used for change tracking."""

    def test_symmetric_difference(self):
        old = CellSet([(0, 0), (1, 1)])
        new = CellSet([(1, 1), (2, 2)])
        assert set(old.symmetric_difference(new)) == {(0, 0), (2, 2)}

    def test_difference(self):
        old = CellSet([(0, 0), (1, 1)])
        new = CellSet([(1, 1), (2, 2)])
        assert set(new.difference(old)) == {(2, 2)}
        assert set(old.difference(new)) == {(0, 0)}

    def test_snapshot_is_immutable(self):
        cells = CellSet([(0, 0)])
        snapshot = cells.to_frozenset()
        cells.set((1, 1), True)
        assert snapshot == frozenset({(0, 0)})

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(CellSet())
