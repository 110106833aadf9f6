from fuku.styles import display_width
from fuku.viewport import Viewport


def _filled(count, width=20, height=10):
    vp = Viewport(width, height)
    lines = [f"line {n}" for n in range(count)]
    vp.set_content("\n".join(lines))
    return vp, lines


def test_new_viewport_renders_blank_area_of_its_height():
    vp = Viewport(10, 5)
    assert vp.total_line_count() == 0
    rendered = vp.view()
    assert rendered.strip() == ""
    assert len(rendered.split("\n")) == vp.height


def test_set_content_counts_lines():
    vp, lines = _filled(7)
    assert vp.total_line_count() == len(lines)


def test_crlf_is_treated_like_lf():
    first = Viewport(10, 5)
    second = Viewport(10, 5)
    first.set_content("alpha\r\nbeta")
    second.set_content("alpha\nbeta")
    assert first.total_line_count() == second.total_line_count()
    assert first.view() == second.view()


def test_goto_bottom_shows_last_line():
    vp, lines = _filled(30)
    vp.goto_bottom()
    assert vp.y_offset == vp.total_line_count() - vp.height
    assert vp.at_bottom
    assert lines[-1] in vp.view()
    assert lines[0] not in vp.view()


def test_down_and_up_move_one_line():
    vp, _ = _filled(30)
    start = vp.y_offset
    assert vp.handle_key("down") is True
    assert vp.y_offset == start + 1
    assert vp.handle_key("j") is True
    assert vp.y_offset == start + 2
    assert vp.handle_key("k") is True
    assert vp.handle_key("up") is True
    assert vp.y_offset == start


def test_up_at_top_does_not_move():
    vp, _ = _filled(30)
    assert vp.handle_key("up") is False
    assert vp.at_top


def test_down_at_bottom_does_not_move():
    vp, _ = _filled(30)
    vp.goto_bottom()
    offset = vp.y_offset
    assert vp.handle_key("down") is False
    assert vp.y_offset == offset


def test_page_down_moves_by_height_and_half_page_by_less():
    vp, _ = _filled(50)
    assert vp.handle_key("pgdown") is True
    assert vp.y_offset == vp.height
    vp.goto_top()
    assert vp.handle_key("ctrl+d") is True
    assert 0 < vp.y_offset < vp.height


def test_unknown_key_is_ignored():
    vp, _ = _filled(30)
    assert vp.handle_key("x") is False
    assert vp.y_offset == 0


def test_shrinking_content_pulls_offset_back():
    vp, _ = _filled(40)
    vp.y_offset = 35
    vp.set_content("one\ntwo")
    assert 0 <= vp.y_offset <= vp.max_y_offset


def test_view_pads_lines_to_width_and_height():
    vp, lines = _filled(3, width=30, height=6)
    rendered = vp.view().split("\n")
    assert len(rendered) == vp.height
    assert all(display_width(line) >= vp.width for line in rendered)
    assert [line.rstrip() for line in rendered[: len(lines)]] == lines