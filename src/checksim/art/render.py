"""SVG rendering of resolved checks, mirroring ``ChecksArt.generateSVG``."""
from __future__ import annotations

from pathlib import Path
from typing import Mapping

from .check import Check
from .colors import PALETTE_SIZE, color_indexes
from .tables import DIVISORS, EIGHTY_COLORS, MAX_DIVISOR_INDEX

CANVAS_SIZE = 680
PALETTE_STEP = 4
BASE_CYCLE_SECONDS = 40
UNREVEALED_COLOR = "424242"
TERMINAL_COLOR = "000"

CHECKS_PATH = (
    "M21.36 9.886A3.933 3.933 0 0 0 18 8c-1.423 0-2.67.755-3.36 1.887a3.935 3.935 0 0 0-4.753 4.753A3.933 "
    "3.933 0 0 0 8 18c0 1.423.755 2.669 1.886 3.36a3.935 3.935 0 0 0 4.753 4.753 3.933 3.933 0 0 0 4.863 "
    "1.59 3.953 3.953 0 0 0 1.858-1.589 3.935 3.935 0 0 0 4.753-4.754A3.933 3.933 0 0 0 28 18a3.933 3.933 "
    "0 0 0-1.887-3.36 3.934 3.934 0 0 0-1.042-3.711 3.934 3.934 0 0 0-3.71-1.043Zm-3.958 11.713 "
    "4.562-6.844c.566-.846-.751-1.724-1.316-.878l-4.026 6.043-1.371-1.368c-.717-.722-1.836.396-1.116 "
    "1.116l2.17 2.15a.788.788 0 0 0 1.097-.22Z"
)


def per_row(count: int) -> int:
    if count == 80:
        return 8
    if count >= 20:
        return 4
    if count in (10, 4):
        return 2
    return 1


def row_x(count: int) -> int:
    if count <= 1:
        return 286
    if count == 5:
        return 304
    if count in (10, 4):
        return 268
    return 196


def row_y(count: int) -> int:
    if count > 4:
        return 160
    if count == 4:
        return 268
    if count > 1:
        return 304
    return 286


def glyph_scale(count: int) -> str:
    if count > 20:
        return "1"
    if count > 1:
        return "2"
    return "3"


def palette_walk(offset: int, direction: int) -> str:
    """Semicolon-separated colour cycle for the fill animation of one glyph."""

    if direction == 0:
        steps = range(offset + PALETTE_SIZE, offset, -PALETTE_STEP)
    else:
        steps = range(offset, offset + PALETTE_SIZE, PALETTE_STEP)
    values = [f"#{EIGHTY_COLORS[j % PALETTE_SIZE]}" for j in steps]
    values.append(f"#{EIGHTY_COLORS[offset]}")
    return ";".join(values)


def _fmt(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def generate_svg(check: Check, virtual_map: Mapping[int, Check]) -> str:
    """Render ``check`` as a self-contained SVG document."""

    is_black = check.stored.divisor_index == MAX_DIVISOR_INDEX
    count = 1 if is_black else DIVISORS[check.stored.divisor_index]
    grid_color = "#F2F2F2" if is_black else "#191919"
    canvas_color = "#FFF" if is_black else "#111"
    animated = check.is_revealed and not is_black

    if is_black:
        colors = [TERMINAL_COLOR]
        offsets: list[int] = []
    elif not check.is_revealed:
        colors = [UNREVEALED_COLOR]
        offsets = []
    else:
        offsets = color_indexes(check.stored.divisor_index, check, virtual_map)
        colors = [EIGHTY_COLORS[i] for i in offsets]

    scale = glyph_scale(count)
    space_x = 36 if count == 80 else 72
    space_y = 36 if count > 20 else 72
    row_count = per_row(count)
    indent = count == 40
    cur_x: float = row_x(count)
    cur_y = row_y(count)

    grid_row = "".join(f'<use href="#square" x="{196 + i * 36}" y="160"/>' for i in range(8))
    grid = "".join(f'<use href="#row" y="{i * 36}"/>' for i in range(10))

    glyphs = []
    for i in range(count):
        index_in_row = i % row_count
        if index_in_row == 0 and i > 0:
            cur_y += space_y
            if indent:
                if i % (row_count * 2) == 0:
                    cur_x -= space_x / 2
                else:
                    cur_x += space_x / 2
        tx = cur_x + index_in_row * space_x
        color = colors[i] if animated else colors[0]
        anim = ""
        if animated:
            dur = BASE_CYCLE_SECONDS // check.speed
            anim = (
                f'<animate attributeName="fill" values="{palette_walk(offsets[i], check.direction)}" '
                f'dur="{dur}s" begin="animation.begin" repeatCount="indefinite"/>'
            )
        glyphs.append(
            f'<g transform="translate({_fmt(tx)}, {cur_y}) scale({scale})">'
            f'<use href="#check" fill="#{color}">{anim}</use></g>'
        )

    return "".join(
        [
            f'<svg viewBox="0 0 {CANVAS_SIZE} {CANVAS_SIZE}" fill="none" xmlns="http://www.w3.org/2000/svg" '
            'style="width:100%;background:black;">',
            "<defs>",
            f'<path id="check" fill-rule="evenodd" d="{CHECKS_PATH}"></path>',
            f'<rect id="square" width="36" height="36" stroke="{grid_color}"></rect>',
            f'<g id="row">{grid_row}</g>',
            "</defs>",
            f'<rect width="{CANVAS_SIZE}" height="{CANVAS_SIZE}" fill="black"/>',
            f'<rect x="188" y="152" width="304" height="376" fill="{canvas_color}"/>',
            f'<g id="grid" x="196" y="160">{grid}</g>',
            "".join(glyphs),
            f'<rect width="{CANVAS_SIZE}" height="{CANVAS_SIZE}" fill="transparent">',
            f'<animate attributeName="width" from="{CANVAS_SIZE}" to="0" dur="0.2s" begin="click" '
            'fill="freeze" id="animation"/>',
            "</rect>",
            "</svg>",
        ]
    )


def save_svg(svg: str, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(svg, encoding="utf-8")
    return path
