import pytest

from utils import (
    InvalidGridError,
    clone_grid,
    format_grid,
    load_grid,
    parse_grid,
    to_cells,
    to_ints,
    validate_grid,
)


class TestValidateGrid:
    """Test grid shape checks."""

    def test_returns_dimensions(self):
        assert validate_grid([[0, 1, 0], [1, 0, 1]]) == (2, 3)

    def test_empty_grid(self):
        with pytest.raises(InvalidGridError, match="no rows"):
            validate_grid([])

    def test_empty_first_row(self):
        with pytest.raises(InvalidGridError, match="no columns"):
            validate_grid([[], []])

    def test_ragged_grid(self):
        with pytest.raises(InvalidGridError) as exc_info:
            validate_grid([[0, 0, 0], [0, 0]])

        assert exc_info.value.row == 1

    def test_non_binary_cell(self):
        with pytest.raises(InvalidGridError, match="not 0 or 1"):
            validate_grid([[0, 3]])

    def test_error_without_row(self):
        """Test errors not tied to a row carry row=None."""
        with pytest.raises(InvalidGridError) as exc_info:
            validate_grid([])

        assert exc_info.value.row is None


class TestConversions:
    """Test copying between bool and 0/1 grids."""

    def test_to_cells_booleans(self):
        assert to_cells([[0, 1], [1, 0]]) == [[False, True], [True, False]]

    def test_to_ints(self):
        assert to_ints([[False, True], [True, False]]) == [[0, 1], [1, 0]]

    def test_to_cells_validates(self):
        with pytest.raises(InvalidGridError):
            to_cells([[0, 1], [0]])

    def test_clone_shares_no_rows(self):
        grid = [[0, 1], [1, 0]]
        copy = clone_grid(grid)
        copy[0][0] = 1

        assert grid == [[0, 1], [1, 0]]
        assert copy is not grid
        assert all(a is not b for a, b in zip(copy, grid))


class TestText:
    """Test the text grid format."""

    def test_format_grid(self):
        assert format_grid([[True, False], [False, True]]) == "1 0\n0 1"

    def test_parse_spaced(self):
        assert parse_grid("0 1 0\n1 1 1\n") == [[0, 1, 0], [1, 1, 1]]

    def test_parse_packed(self):
        assert parse_grid(".#.\n###") == [[0, 1, 0], [1, 1, 1]]

    def test_parse_plaintext_style(self):
        assert parse_grid(".O.\n..O\nOOO") == [[0, 1, 0], [0, 0, 1], [1, 1, 1]]

    def test_parse_skips_blank_lines(self):
        assert parse_grid("\n1 0\n\n0 1\n\n") == [[1, 0], [0, 1]]

    def test_parse_accepts_format_output(self):
        """Test text written by format_grid reads back unchanged."""
        grid = [[0, 1, 1], [1, 0, 0]]

        assert parse_grid(format_grid(grid)) == grid

    def test_parse_bad_token(self):
        with pytest.raises(InvalidGridError, match="line 2"):
            parse_grid("0 1\n0 x")

    def test_parse_ragged(self):
        with pytest.raises(InvalidGridError):
            parse_grid("0 1 0\n1 1")

    def test_parse_empty(self):
        with pytest.raises(InvalidGridError):
            parse_grid("\n\n")

    def test_load_grid(self, tmp_path):
        path = tmp_path / "seed.txt"
        path.write_text("0 0 0\n1 1 1\n0 0 0\n", encoding="utf-8")

        assert load_grid(str(path)) == [[0, 0, 0], [1, 1, 1], [0, 0, 0]]
