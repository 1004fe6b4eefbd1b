import pytest

from scatterkit.specs import FontSpecs, LineSpecs, OffsetSpecs, PointSpecs, Specs


def test_specs_is_abstract():
    with pytest.raises(TypeError):
        Specs()


def test_line_specs_empty_renders_nothing():
    assert LineSpecs().render() == ""


def test_line_specs_setters_chain():
    specs = LineSpecs()
    assert specs.line_style(1) is specs
    assert specs.line_width(2) is specs
    assert specs.dash_type(3) is specs


def test_line_specs_single_option():
    assert LineSpecs().line_style(2).render() == "linestyle 2"
    assert LineSpecs().line_color("#404040").render() == "linecolor '#404040'"


def test_line_specs_order_is_fixed():
    specs = LineSpecs().dash_type(4).line_color("red").line_width(3).line_type(2).line_style(1)
    rendered = specs.render()
    names = ["linestyle", "linetype", "linewidth", "linecolor", "dashtype"]
    positions = [rendered.index(name) for name in names]
    assert positions == sorted(positions)
    assert "  " not in rendered
    assert rendered == rendered.strip()


def test_line_specs_later_call_overrides():
    specs = LineSpecs().line_width(1).line_width(5)
    assert specs.render() == "linewidth 5"


def test_str_matches_render():
    specs = LineSpecs().line_type(1)
    assert str(specs) == specs.render()


def test_point_specs():
    assert PointSpecs().render() == ""
    assert PointSpecs().point_size(2).render() == "pointsize 2"
    assert PointSpecs().point_type(7).point_size(2).render() == "pointtype 7 pointsize 2"


def test_font_specs():
    assert FontSpecs().render() == ""
    assert FontSpecs().font_name("Georgia").render() == "font 'Georgia,'"
    assert FontSpecs().font_size(12).render() == "font ',12'"
    assert FontSpecs().font_name("Times").font_size(16).render() == "font 'Times,16'"


def test_font_size_negative_rejected():
    with pytest.raises(ValueError):
        FontSpecs().font_size(-1)


def test_offset_default_renders_nothing():
    assert OffsetSpecs().render() == ""


def test_offset_zero_shift_renders_nothing():
    assert OffsetSpecs().shift_along_x(0).shift_along_y(0).render() == ""


def test_offset_character_shift():
    assert OffsetSpecs().shift_along_x(2).render() == "offset 2, 0"
    assert OffsetSpecs().shift_along_y(1.5).render() == "offset 0, 1.5"


def test_offset_graph_and_screen():
    specs = OffsetSpecs().shift_along_graph_x(0.5).shift_along_screen_y(0.25)
    assert specs.render() == "offset graph 0.5, screen 0.25"
    specs = OffsetSpecs().shift_along_screen_x(1).shift_along_graph_y(2)
    assert specs.render() == "offset screen 1, graph 2"


class _Combined(LineSpecs, PointSpecs):
    def render(self):
        return LineSpecs.render(self) + " " + PointSpecs.render(self)


def test_mixins_combine_and_chain():
    line_part = LineSpecs().line_width(2).render()
    point_part = PointSpecs().point_size(3).render()
    assert line_part == "linewidth 2"
    assert point_part == "pointsize 3"

    combined = _Combined()
    assert combined.line_width(2).point_size(3) is combined
    assert str(combined) == line_part + " " + point_part


def test_instances_do_not_share_state():
    first = LineSpecs().line_style(3)
    second = LineSpecs()
    assert second.render() == ""
    assert first.render() == "linestyle 3"