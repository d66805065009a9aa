import pytest

from pokefight.health import BAR_HEIGHT, BAR_WIDTH, Healthbar, health_color


def test_full_health_is_green():
    assert health_color(100) == (0, 255, 0)


def test_no_health_is_red():
    assert health_color(0) == (255, 0, 0)


@pytest.mark.parametrize("health", [51, 60, 75, 99])
def test_upper_half_keeps_green_full(health):
    red, green, blue = health_color(health)
    assert green == 255 and blue == 0 and 0 <= red <= 255


@pytest.mark.parametrize("health", [1, 10, 25, 49])
def test_lower_half_keeps_red_full(health):
    red, green, blue = health_color(health)
    assert red == 255 and blue == 0 and 0 <= green <= 255


def test_color_reddens_as_health_drops():
    reds = [health_color(h)[0] for h in range(100, 50, -1)]
    greens = [health_color(h)[1] for h in range(50, -1, -1)]
    assert reds == sorted(reds)
    assert greens == sorted(greens, reverse=True)


def test_full_bar_size():
    bar = Healthbar()
    bar.set_health(100)
    assert bar.size == (BAR_WIDTH, BAR_HEIGHT)
    assert (BAR_WIDTH, BAR_HEIGHT) == (120, 15)


def test_bar_shrinks_with_health():
    bar = Healthbar()
    bar.set_health(80)
    longer = bar.size[0]
    bar.set_health(30)
    assert 0 < bar.size[0] < longer < BAR_WIDTH


def test_negative_health_clamped():
    bar = Healthbar()
    bar.set_health(-5)
    assert bar.health == 0
    assert bar.size == (0, BAR_HEIGHT)
    assert bar.color == health_color(0)
    assert bar.fainted


def test_decrease_waits_for_update():
    bar = Healthbar()
    bar.decrease(40)
    assert bar.health == 60
    assert bar.size[0] == BAR_WIDTH
    bar.update()
    assert bar.size[0] < BAR_WIDTH
    assert bar.color == health_color(60)


def test_texts():
    bar = Healthbar(name="auron", level=7)
    assert bar.name_text == "auron"
    assert bar.level_text == "lvl: 7"
    bar.level = 8
    bar.update()
    assert bar.level_text == "lvl: 8"


def test_overkill_decrease_then_update():
    bar = Healthbar(health=10)
    bar.decrease(25)
    assert bar.health == -15
    bar.update()
    assert bar.health == 0