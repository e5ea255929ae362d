from typing import List, Optional, Sequence, Tuple

CellGrid = List[List[bool]]
IntGrid = List[List[int]]

# Accepted spellings for a cell when reading a seed file
LIVE_TOKENS = {"1", "#", "O", "o", "■"}
DEAD_TOKENS = {"0", ".", "-", "_"}


class InvalidGridError(ValueError):
    """Raised when a grid is empty, ragged or holds a non-binary cell."""

    def __init__(self, message: str, row: Optional[int] = None):
        if row is not None:
            message = f"row {row}: {message}"
        super().__init__(message)
        self.row = row


def validate_grid(grid: Sequence[Sequence[object]]) -> Tuple[int, int]:
    """Check that `grid` is a non-empty rectangle of 0/1 cells and return (height, width)."""
    if not grid:
        raise InvalidGridError("grid has no rows")
    width = len(grid[0])
    if width == 0:
        raise InvalidGridError("grid has no columns", row=0)

    for r, row in enumerate(grid):
        if len(row) != width:
            raise InvalidGridError(f"expected {width} cells, got {len(row)}", row=r)
        for cell in row:
            # bool is an int subclass, so True/False pass here too
            if cell not in (0, 1):
                raise InvalidGridError(f"cell value {cell!r} is not 0 or 1", row=r)
    return len(grid), width


def clone_grid(grid: Sequence[Sequence[object]]) -> list:
    """Return a copy of a 2D grid that shares no row with the original."""
    return [list(row) for row in grid]


def to_cells(grid: Sequence[Sequence[object]]) -> CellGrid:
    """Validate `grid` and copy it into booleans."""
    validate_grid(grid)
    return [[bool(cell) for cell in row] for row in grid]


def to_ints(cells: Sequence[Sequence[object]]) -> IntGrid:
    """Copy a grid into 0/1 ints."""
    return [[int(bool(cell)) for cell in row] for row in cells]


def format_grid(grid: Sequence[Sequence[object]]) -> str:
    """One line per row, cells as 0/1 separated by a single space."""
    return "\n".join(" ".join(str(int(bool(cell))) for cell in row) for row in grid)


def parse_grid(text: str) -> IntGrid:
    """
    Parse a grid written one row per line.
    Cells may be space separated ("0 1 0") or packed (".#." / ".O."); blank
    lines are skipped. The result is validated before it is returned.
    """
    grid: IntGrid = []
    for line_no, line in enumerate(text.splitlines()):
        line = line.strip()
        if not line:
            continue
        tokens = line.split() if " " in line else list(line)
        row = []
        for token in tokens:
            if token in LIVE_TOKENS:
                row.append(1)
            elif token in DEAD_TOKENS:
                row.append(0)
            else:
                raise InvalidGridError(f"unexpected token {token!r} on line {line_no + 1}")
        grid.append(row)

    validate_grid(grid)
    return grid


def load_grid(path: str) -> IntGrid:
    """Read a seed grid from a text file."""
    with open(path, "r", encoding="utf-8") as f:
        return parse_grid(f.read())
