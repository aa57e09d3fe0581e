"""
Unit tests for Cell class.

Tests cell defaults, immutable updates, keys and observation conversion.
"""
import dataclasses

import pytest
from minefield import Cell, parse_key


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_clear(self) -> None:
        """New cell should be hidden, unflagged and not a mine."""
        cell = Cell(row=0, col=0)
        assert cell.is_mine is False
        assert cell.is_revealed is False
        assert cell.is_flagged is False
        assert cell.adjacent_mines == 0
        assert cell.is_hidden is True

    def test_key_and_id(self) -> None:
        """Key is (row, col) and id is the "row-col" string."""
        cell = Cell(row=4, col=5)
        assert cell.key == (4, 5)
        assert cell.id == "4-5"

    def test_cell_is_frozen(self) -> None:
        """Cells cannot be modified in place."""
        cell = Cell(row=0, col=0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            cell.is_revealed = True


# ============================================================================
# Cell Update Tests
# ============================================================================

class TestCellUpdates:
    """Test copy-on-write helpers."""

    def test_revealed_returns_new_cell(self) -> None:
        """revealed() leaves the original untouched."""
        cell = Cell(row=1, col=2, adjacent_mines=3)
        result = cell.revealed()
        assert result.is_revealed is True
        assert result.adjacent_mines == 3
        assert cell.is_revealed is False

    def test_toggled_flips_flag(self) -> None:
        """toggled() flips the flag both ways."""
        cell = Cell(row=0, col=0)
        flagged = cell.toggled()
        assert flagged.is_flagged is True
        assert flagged.is_hidden is False
        assert flagged.toggled().is_flagged is False


# ============================================================================
# Observation Tests
# ============================================================================

class TestCellObservation:
    """Test observation value conversion."""

    def test_hidden_cell_observation(self) -> None:
        assert Cell(row=0, col=0, adjacent_mines=2).to_observation() == -1

    def test_flagged_cell_observation(self) -> None:
        assert Cell(row=0, col=0, is_flagged=True).to_observation() == -2

    def test_revealed_number_observation(self) -> None:
        cell = Cell(row=0, col=0, adjacent_mines=3, is_revealed=True)
        assert cell.to_observation() == 3

    def test_revealed_mine_observation(self) -> None:
        cell = Cell(row=0, col=0, is_mine=True, is_revealed=True)
        assert cell.to_observation() == 9


# ============================================================================
# Key Parsing Tests
# ============================================================================

class TestParseKey:
    """Test cell identifier parsing."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("4-4", (4, 4)),
            ("10-3", (10, 3)),
            ("2 7", (2, 7)),
            ("2,7", (2, 7)),
            (" 4 - 4 ", (4, 4)),
            ("-1-2", (-1, 2)),
            ("4--4", (4, -4)),
            ((3, 1), (3, 1)),
        ],
    )
    def test_valid_identifiers(self, value, expected) -> None:
        assert parse_key(value) == expected

    @pytest.mark.parametrize(
        "value", ["", "4", "a-b", "1-2-3", "foo", "4-", "--4"]
    )
    def test_invalid_identifiers_raise(self, value) -> None:
        with pytest.raises(ValueError):
            parse_key(value)
