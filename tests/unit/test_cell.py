"""
Unit tests for Cell class.

Tests reveal behavior, observation conversion and text symbols.
"""
import pytest
from minefield import Cell


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        assert Cell().is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.is_revealed is False
        assert cell.is_hidden is True

    def test_default_cell_has_zero_adjacent_mines(self) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert Cell().adjacent_mines == 0


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_revealed is True

    def test_reveal_already_revealed_returns_false(
        self, hidden_cell: Cell
    ) -> None:
        """Revealing an already revealed cell changes nothing."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_revealed is True


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        assert hidden_cell.to_observation() == -1

    def test_hidden_mine_observation_is_negative_one(
        self, mine_cell: Cell
    ) -> None:
        """A hidden mine must not leak through the observation."""
        assert mine_cell.to_observation() == -1

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        cell = Cell(adjacent_mines=count)
        cell.reveal()
        assert cell.to_observation() == count

    def test_revealed_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9


# ============================================================================
# Cell Symbol Tests
# ============================================================================

class TestCellSymbol:
    """Test single-character rendering."""

    def test_hidden_cell_symbol(self, hidden_cell: Cell) -> None:
        assert hidden_cell.to_symbol() == "#"

    def test_hidden_mine_only_shown_on_request(self, mine_cell: Cell) -> None:
        assert mine_cell.to_symbol() == "#"
        assert mine_cell.to_symbol(show_mines=True) == "*"

    def test_revealed_zero_symbol(self, hidden_cell: Cell) -> None:
        hidden_cell.reveal()
        assert hidden_cell.to_symbol() == "."

    def test_revealed_count_symbol(self) -> None:
        cell = Cell(adjacent_mines=3)
        cell.reveal()
        assert cell.to_symbol() == "3"
