import pytest

from panelkit.color import Color, interpolate


def rgba(c):
    return (c.red, c.green, c.blue, c.alpha)


def test_default_is_opaque_black():
    assert rgba(Color()) == (0.0, 0.0, 0.0, 1.0)


def test_components_are_clamped():
    assert rgba(Color(2.0, -1.0, 0.5, 3.0)) == (1.0, 0.0, 0.5, 1.0)


def test_from_int_unpacks_bytes():
    c = Color.from_int(0x12345678)
    assert c.to_bytes() == (0x12, 0x34, 0x56, 0x78)
    assert c.to_int() == 0x12345678


@pytest.mark.parametrize("value", [0x00000000, 0xFFFFFFFF, 0xDDDDDDFF, 0x888888FF, 0x01020304])
def test_int_round_trip(value):
    assert Color.from_int(value).to_int() == value


@pytest.mark.parametrize("channels", [(0, 0, 0, 0), (255, 255, 255, 255), (1, 127, 128, 254)])
def test_bytes_round_trip(channels):
    assert Color.from_bytes(*channels).to_bytes() == channels


def test_rgb_takes_blue_before_green():
    c = Color.rgb(0.1, 0.2, 0.3)
    assert c.red == pytest.approx(0.1)
    assert c.blue == pytest.approx(0.2)
    assert c.green == pytest.approx(0.3)
    assert c.alpha == 1.0


def test_primary_hues():
    assert Color(1.0, 0.0, 0.0).hue == pytest.approx(0.0)
    assert Color(0.0, 1.0, 0.0).hue == pytest.approx(1.0 / 3.0)
    assert Color(0.0, 0.0, 1.0).hue == pytest.approx(2.0 / 3.0)


def test_gray_has_no_saturation():
    c = Color(0.4, 0.4, 0.4)
    assert c.saturation == 0.0
    assert c.hue == 0.0
    assert c.lightness == pytest.approx(0.4)


def test_hue_setter_wraps():
    c = Color(1.0, 0.0, 0.0)
    c.hue = 1.25
    assert c.hue == pytest.approx(0.25)
    c.hue = -0.75
    assert c.hue == pytest.approx(0.25)


def test_setting_hue_rotates_red_to_green():
    c = Color(1.0, 0.0, 0.0)
    c.hue = 1.0 / 3.0
    assert rgba(c) == pytest.approx(rgba(Color(0.0, 1.0, 0.0)))


@pytest.mark.parametrize(
    "channels",
    [(0.2, 0.4, 0.6, 1.0), (0.9, 0.1, 0.3, 0.5), (0.5, 0.0, 0.0, 1.0), (0.3, 0.8, 0.8, 0.2)],
)
def test_hsl_round_trip(channels):
    c = Color(*channels)
    back = Color.hsl(c.hue, c.saturation, c.lightness, c.alpha)
    assert rgba(back) == pytest.approx(channels, abs=1e-9)


def test_hsl_pure_red():
    assert rgba(Color.hsl(0.0, 1.0, 0.5)) == pytest.approx((1.0, 0.0, 0.0, 1.0))


def test_reassigning_lightness_keeps_channels():
    c = Color(0.2, 0.5, 0.7)
    c.lightness = c.lightness
    assert rgba(c) == pytest.approx((0.2, 0.5, 0.7, 1.0))


def test_channel_setter_updates_hsl():
    c = Color(0.0, 0.0, 0.0)
    c.green = 1.0
    assert c.hue == pytest.approx(Color(0.0, 1.0, 0.0).hue)
    c.red = 5.0
    assert c.red == 1.0


def test_alpha_setter_clamps_and_keeps_rgb():
    c = Color(0.3, 0.6, 0.9)
    c.alpha = -2.0
    assert rgba(c) == (0.3, 0.6, 0.9, 0.0)


def test_interpolate_endpoints():
    a = Color(0.1, 0.2, 0.3, 0.4)
    b = Color(0.9, 0.8, 0.7, 0.6)
    assert rgba(interpolate(a, b, 0.0)) == pytest.approx(rgba(a))
    assert rgba(interpolate(a, b, 1.0)) == pytest.approx(rgba(b))


def test_interpolate_is_symmetric():
    a = Color(0.1, 0.2, 0.3, 0.4)
    b = Color(0.9, 0.8, 0.7, 0.6)
    assert rgba(interpolate(a, b, 0.3)) == pytest.approx(rgba(interpolate(b, a, 0.7)))


def test_equality():
    assert Color.from_int(0xFF0000FF) == Color(1.0, 0.0, 0.0, 1.0)
    assert not (Color(0.5, 0.5, 0.5) == Color(0.5, 0.5, 0.6))