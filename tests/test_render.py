import re
import xml.etree.ElementTree as ET

from checksim.art import Check, EIGHTY_COLORS, color_indexes, generate_svg, save_svg, simulate_composite
from checksim.art.render import palette_walk

SVG_NS = "{http://www.w3.org/2000/svg}"


def _terminal():
    check = Check.root(11)
    for depth in range(7):
        check = simulate_composite(check, Check.root(20 + depth), 3)
    return check


def test_root_svg_is_well_formed():
    root = Check.root(42)
    svg = generate_svg(root, {})
    tree = ET.fromstring(svg)
    assert tree.tag == f"{SVG_NS}svg"
    assert tree.get("viewBox") == "0 0 680 680"
    assert svg.count('<use href="#check"') == 80
    assert svg.count('attributeName="fill"') == 80


def test_glyph_colours_follow_indexes():
    root = Check.root(42)
    svg = generate_svg(root, {})
    fills = re.findall(r'<use href="#check" fill="#([0-9A-F]+)"', svg)
    assert fills == [EIGHTY_COLORS[i] for i in color_indexes(0, root, {})]


def test_unrevealed_is_grey_and_static():
    svg = generate_svg(Check.root(42, is_revealed=False), {})
    assert svg.count('fill="#424242"') == 80
    assert 'attributeName="fill"' not in svg


def test_terminal_check():
    check = _terminal()
    svg = generate_svg(check, {})
    assert svg.count('<use href="#check"') == 1
    assert 'fill="#000"' in svg
    assert 'attributeName="fill"' not in svg
    assert 'fill="#FFF"' in svg
    assert 'stroke="#F2F2F2"' in svg
    assert "translate(286, 286) scale(3)" in svg


def test_animation_duration_follows_speed():
    for speed, seconds in ((1, 40), (2, 20), (4, 10)):
        svg = generate_svg(Check.root(42, speed=speed), {})
        assert f'dur="{seconds}s"' in svg


def test_palette_walk():
    forward = palette_walk(0, 0).split(";")
    assert len(forward) == 21
    assert forward[0] == "#E84AA9"
    assert forward[1] == "#371471"
    assert forward[-1] == "#E84AA9"

    backward = palette_walk(0, 1).split(";")
    assert len(backward) == 21
    assert backward[1] == "#FF7F8E"


def test_forty_layout_indents_alternate_rows():
    keeper, burner = Check.root(100), Check.root(200)
    l1 = simulate_composite(keeper, burner, 5)
    svg = generate_svg(l1, {5: burner})
    assert svg.count('<use href="#check"') == 40
    assert "translate(196, 160) scale(1)" in svg
    assert "translate(232, 196) scale(1)" in svg


def test_save_svg(tmp_path):
    path = save_svg(generate_svg(Check.root(1), {}), tmp_path / "nested" / "one.svg")
    assert path.exists()
    assert path.read_text(encoding="utf-8").startswith("<svg")
