import pytest

from qlfront.viewport import (
    Rect,
    distort,
    fit_viewport,
    map_mouse,
    read_curve,
    shader_source,
)


def test_fit_exact_uses_whole_window():
    assert fit_viewport(512, 256, 2.0, 1.0) == Rect(0, 0, 512, 256)


def test_fit_wide_window_is_centred_horizontally():
    rect = fit_viewport(1000, 256, 2.0, 1.0)
    assert rect.y == 0
    assert rect.h == 256
    assert rect.w < 1000
    assert 1000 - (2 * rect.x + rect.w) in (0, 1)


def test_fit_tall_window_is_centred_vertically():
    rect = fit_viewport(512, 1000, 2.0, 1.0)
    assert rect.x == 0
    assert rect.w == 512
    assert rect.h < 1000
    assert 1000 - (2 * rect.y + rect.h) in (0, 1)


def test_fit_keeps_ratio():
    rect = fit_viewport(1920, 1080, 2.0, 1.355)
    assert abs(rect.w - 2.0 * rect.h / 1.355) < 3.0


def test_distort_centre_is_fixed():
    assert distort(0.5, 0.5, 0.3, 0.4) == pytest.approx((0.5, 0.5))


def test_distort_zero_curve_is_identity():
    assert distort(0.1, 0.9, 0.0, 0.0) == pytest.approx((0.1, 0.9))


def test_distort_is_symmetric():
    ax, ay = distort(0.2, 0.3, 0.5, 0.5)
    bx, by = distort(0.8, 0.7, 0.5, 0.5)
    assert ax + bx == pytest.approx(1.0)
    assert ay + by == pytest.approx(1.0)


def test_read_curve_finds_defines():
    src = "#define CURVATURE_X 0.25\n#define CURVATURE_Y 0.5\nvoid main() {}\n"
    assert read_curve(src) == (0.25, 0.5)


def test_read_curve_missing_falls_back():
    assert read_curve("#define CURVATURE_X 0.25\n") == (1.0, 1.0)


def test_read_curve_ignores_without_define():
    assert read_curve("CURVATURE_X 0.2 CURVATURE_Y 0.3") == (1.0, 1.0)


def test_shader_source_glsl_min_version():
    out = shader_source("vertex", "body", None, "glsl", 130, 450)
    assert out == "#version 130\n#define VERTEX\nbody"


def test_shader_source_glsl_max_version():
    out = shader_source("fragment", "body", None, "glsl", 100, 150)
    assert out.startswith("#version 120\n#define FRAGMENT\n")


def test_shader_source_glsl_old():
    out = shader_source("fragment", "body", None, "glsl", 100, 110)
    assert out.startswith("#version 110\n")


def test_shader_source_glsles_default_header_and_prepend():
    out = shader_source("vertex", "body", "#define CURVATURE\n", "glsles", 100, 100)
    assert out == (
        "#version 100\nprecision mediump int;\nprecision mediump float;\n"
        "#define VERTEX\n#define CURVATURE\nbody"
    )


def test_map_mouse_identity():
    assert map_mouse(10, 20, Rect(0, 0, 512, 256), 512, 256) == (10, 20)


def test_map_mouse_clamps():
    rect = Rect(0, 0, 512, 256)
    assert map_mouse(-50, -50, rect, 512, 256) == (0, 0)
    assert map_mouse(5000, 5000, rect, 512, 256) == (511, 255)


def test_map_mouse_curve_centre():
    rect = Rect(0, 0, 512, 256)
    assert map_mouse(256, 128, rect, 512, 256, (0.5, 0.5)) == (256, 128)