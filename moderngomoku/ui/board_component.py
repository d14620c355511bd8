"""SVG board renderer + JavaScript click handler for Gradio."""

from __future__ import annotations

from typing import Optional

from moderngomoku.game.board import BOARD_SIZE, COL_LABELS, format_point
from moderngomoku.game.state import GomokuGameState
from moderngomoku.game.types import Player, Point

# Layout constants
CELL_SIZE = 40
MARGIN = 40
BOARD_PX = MARGIN * 2 + CELL_SIZE * (BOARD_SIZE - 1)
STONE_RADIUS = 16
CLICK_RADIUS = 18  # Invisible click target radius

# Colors
BG_COLOR = "#F0D9B5"
LINE_COLOR = "#5A3C28"
BLACK_STONE = "#2D2D2D"
WHITE_STONE = "#F0F0F0"
WHITE_STROKE = "#888"
SHADOW_COLOR = "rgba(0, 0, 0, 0.25)"
LAST_MOVE_COLOR = "#FF5050"
HOVER_COLOR = "rgba(45, 45, 45, 0.6)"

# Banner colors keyed by outcome text
BANNER_WIN = "#4ADE80"
BANNER_LOSS = "#F87171"
BANNER_DRAW = "#FFFFFF"

# Traditional star points
STAR_POINTS = (3, 7, 11)


def _coord(row: int, col: int) -> tuple[int, int]:
    """Convert 0-indexed board coordinates to SVG pixel coordinates."""
    x = MARGIN + col * CELL_SIZE
    y = MARGIN + row * CELL_SIZE  # row 0 at top
    return x, y


def _banner_color(message: str) -> str:
    lowered = message.lower()
    if lowered.startswith("you win"):
        return BANNER_WIN
    if "wins" in lowered:
        return BANNER_LOSS
    return BANNER_DRAW


def render_board_svg(
    game_state: GomokuGameState,
    clickable: bool = True,
    highlight_last: bool = True,
    game_over_message: str = "",
) -> str:
    """Render the board as an SVG string."""
    parts: list[str] = []

    parts.append(
        "<style>"
        ".board-click:hover { fill: " + HOVER_COLOR + "; }"
        "</style>"
    )

    # SVG header
    parts.append(
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{BOARD_PX}" height="{BOARD_PX}" '
        f'viewBox="0 0 {BOARD_PX} {BOARD_PX}" '
        f'id="gomoku-board">'
    )

    # Background
    parts.append(
        f'<rect width="{BOARD_PX}" height="{BOARD_PX}" fill="{BG_COLOR}" rx="4"/>'
    )

    # Grid lines
    far = MARGIN + (BOARD_SIZE - 1) * CELL_SIZE
    for i in range(BOARD_SIZE):
        offset = MARGIN + i * CELL_SIZE
        parts.append(
            f'<line x1="{offset}" y1="{MARGIN}" x2="{offset}" y2="{far}" '
            f'stroke="{LINE_COLOR}" stroke-width="1"/>'
        )
        parts.append(
            f'<line x1="{MARGIN}" y1="{offset}" x2="{far}" y2="{offset}" '
            f'stroke="{LINE_COLOR}" stroke-width="1"/>'
        )

    for r in STAR_POINTS:
        for c in STAR_POINTS:
            cx, cy = _coord(r, c)
            parts.append(f'<circle cx="{cx}" cy="{cy}" r="4" fill="{LINE_COLOR}"/>')

    # Column labels (top) and row labels (left)
    for i in range(BOARD_SIZE):
        x, y = _coord(i, i)
        parts.append(
            f'<text x="{x}" y="{MARGIN - 15}" text-anchor="middle" '
            f'font-size="13" font-family="monospace" fill="{LINE_COLOR}">'
            f'{COL_LABELS[i]}</text>'
        )
        parts.append(
            f'<text x="{MARGIN - 22}" y="{y + 5}" text-anchor="middle" '
            f'font-size="13" font-family="monospace" fill="{LINE_COLOR}">'
            f'{i + 1}</text>'
        )

    # Stones
    last = game_state.last_move
    last_point: Optional[Point] = last.point if last is not None else None

    for pt, player in game_state.board.stones():
        x, y = _coord(pt.row, pt.col)
        fill = BLACK_STONE if player is Player.BLACK else WHITE_STONE
        stroke = "none" if player is Player.BLACK else WHITE_STROKE
        parts.append(
            f'<circle cx="{x + 2}" cy="{y + 2}" r="{STONE_RADIUS}" fill="{SHADOW_COLOR}"/>'
        )
        parts.append(
            f'<circle cx="{x}" cy="{y}" r="{STONE_RADIUS}" '
            f'fill="{fill}" stroke="{stroke}" stroke-width="1.5"/>'
        )
        if highlight_last and pt == last_point:
            parts.append(
                f'<circle cx="{x}" cy="{y}" r="{STONE_RADIUS + 3}" fill="none" '
                f'stroke="{LAST_MOVE_COLOR}" stroke-width="2" class="last-move"/>'
            )

    # Clickable intersection targets (invisible circles)
    if clickable and not game_state.is_over:
        for pt in game_state.board.empty_points():
            x, y = _coord(pt.row, pt.col)
            coord_str = format_point(pt)
            parts.append(
                f'<circle cx="{x}" cy="{y}" r="{CLICK_RADIUS}" '
                f'fill="transparent" class="board-click" '
                f'data-coord="{coord_str}" style="cursor:pointer">'
                f'<title>{coord_str}</title></circle>'
            )

    if game_over_message:
        color = _banner_color(game_over_message)
        mid = BOARD_PX // 2
        parts.append(
            f'<rect x="{mid - 120}" y="{mid - 30}" width="240" height="60" rx="8" '
            f'fill="rgba(0, 0, 0, 0.7)"/>'
        )
        parts.append(
            f'<text x="{mid}" y="{mid + 10}" text-anchor="middle" font-size="28" '
            f'font-family="sans-serif" font-weight="bold" fill="{color}">'
            f'{game_over_message}</text>'
        )

    parts.append("</svg>")
    return "\n".join(parts)


# JavaScript that handles clicks on the SVG and writes the coordinate to
# a hidden Gradio Textbox, then triggers the submit button.
BOARD_CLICK_JS = """
() => {
    // Debounce to avoid double-fire
    if (window._gomokuClickBound) return;
    window._gomokuClickBound = true;

    document.addEventListener('click', function(e) {
        const circle = e.target.closest('.board-click');
        if (!circle) return;
        const coord = circle.getAttribute('data-coord');
        if (!coord) return;

        const container = document.querySelector('#coord-input textarea, #coord-input input');
        if (container) {
            // Set value using native setter to trigger Gradio's change detection
            const proto = container.tagName === 'TEXTAREA'
                ? window.HTMLTextAreaElement.prototype
                : window.HTMLInputElement.prototype;
            const nativeSetter = Object.getOwnPropertyDescriptor(proto, 'value')?.set;
            if (nativeSetter) {
                nativeSetter.call(container, coord);
            } else {
                container.value = coord;
            }
            container.dispatchEvent(new Event('input', { bubbles: true }));
            const btn = document.querySelector('#coord-submit');
            if (btn) btn.click();
        }
    });
}
"""
