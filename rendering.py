from typing import Sequence

# ANSI codes
CLEAR_SCREEN = "\x1b[H\x1b[J"
BG_CYAN = "\x1b[46m"
RESET = "\x1b[0m"

HELP_LINE = "Move:↑/↓/←/→ | Toggle: Space | Next: N/Enter | Autoplay: A | Random: R | Clear: C | Quit: Q/Esc"


def render_header(generation: int, alive: int, rows: int, cols: int, autoplay: bool, interval: float) -> str:
    mode = f"[Autoplay {interval}s]" if autoplay else "[Paused]"
    return " | ".join([mode, f"Generation {generation}", f"Alive {alive}", f"Size: {cols}x{rows}"])


def render_board(
    cells: Sequence[Sequence[object]],
    live_cell: str,
    dead_cell: str,
    cursor_y: int = -1,
    cursor_x: int = -1,
) -> str:
    """Draw the grid, highlighting the cell under the cursor."""
    lines = []
    for r, row in enumerate(cells):
        line_parts = []
        for c, cell in enumerate(row):
            char_to_render = live_cell if cell else dead_cell
            if r == cursor_y and c == cursor_x:
                line_parts.append(f"{BG_CYAN}{char_to_render}{RESET}")
            else:
                line_parts.append(char_to_render)
        lines.append("".join(line_parts))
    return "\n".join(lines)


def render(
    cells: Sequence[Sequence[object]],
    generation: int,
    autoplay: bool,
    interval: float,
    cursor_y: int,
    cursor_x: int,
    live_cell: str,
    dead_cell: str,
) -> None:
    """Render the current board state to the terminal with a header and key help."""
    rows = len(cells)
    cols = len(cells[0]) if rows else 0
    alive = sum(1 for row in cells for cell in row if cell)

    header = render_header(generation, alive, rows, cols, autoplay, interval)
    output_buffer = [
        CLEAR_SCREEN + header,
        "-" * len(header),
        render_board(cells, live_cell, dead_cell, cursor_y, cursor_x),
        "-" * len(header),
        HELP_LINE,
    ]
    print("\n".join(output_buffer), flush=True)


def render_results(generation: int, alive: int) -> None:
    """Render the final results in a formatted box."""
    title = "Game Over"
    stats = [
        f"Generations: {generation}",
        f"Alive Cells: {alive}",
    ]

    # Determine the width of the box
    width = max(len(s) for s in stats)
    width = max(width, len(title))

    print("\n")
    print(f"┌{'─' * (width + 2)}┐")
    print(f"│ {title.center(width)} │")
    print(f"├{'─' * (width + 2)}┤")
    for stat in stats:
        print(f"│ {stat.ljust(width)} │")
    print(f"└{'─' * (width + 2)}┘")
