import pytest

from pokefight.attacks_bar import (
    GREEN,
    GREY,
    RED,
    BarPhase,
    SpecialAttacksBar,
    attack_images,
)
from pokefight.timing import Stopwatch


@pytest.fixture
def bar():
    b = SpecialAttacksBar(ptype=10)
    b.initialise(1400, 700)
    return b


def test_attack_images_per_type():
    assert attack_images(10) == (
        "fights/Images/Special_Attacks_Bar/rock.png",
        "fights/Images/Special_Attacks_Bar/rock_bw.png",
    )
    assert attack_images(40)[0].endswith("fire.png")
    assert attack_images(20)[1].endswith("water_bw.png")
    assert attack_images(30)[0].endswith("air.png")


def test_attack_images_unknown_type():
    with pytest.raises(ValueError):
        attack_images(50)


def test_initialise_unknown_type_raises():
    with pytest.raises(ValueError):
        SpecialAttacksBar(ptype=7).initialise(1400, 700)


def test_initialise_layout(bar):
    assert bar.boxsize == 100
    assert bar.base_position == (bar.xpos, bar.ypos)
    assert bar.timer_position == bar.base_position
    assert bar.timer_size == (bar.boxsize, bar.boxsize)
    assert bar.current_image == bar.attack_image
    assert bar.phase is BarPhase.AVAILABLE
    assert bar.attack_sprite_position[0] > bar.xpos


def test_trigger_starts_shooting(bar):
    watch = Stopwatch(5.0)
    assert bar.trigger(watch) is True
    assert bar.phase is BarPhase.SHOOTING
    assert bar.shooting1 and not bar.attack1_available
    assert watch.elapsed == 0.0


def test_trigger_twice_is_refused(bar):
    watch = Stopwatch()
    bar.trigger(watch)
    watch.tick(1.0)
    assert bar.trigger(watch) is False
    assert watch.elapsed == 1.0


def test_shooting_timer_grows(bar):
    watch = Stopwatch()
    bar.trigger(watch)
    watch.tick(bar.attack_time / 2)
    bar.update(watch)
    assert bar.timer_size[1] == pytest.approx(bar.boxsize / 2)
    assert bar.base_color == RED
    assert bar.timer_color == GREY


def test_shooting_ends_in_regeneration(bar):
    watch = Stopwatch()
    bar.trigger(watch)
    watch.tick(bar.attack_time)
    bar.update(watch)
    assert bar.phase is BarPhase.REGENERATING
    assert bar.regenerating1
    assert not bar.attack1_available
    assert bar.current_image == bar.attack_image_bw
    assert watch.elapsed == 0.0


def test_regeneration_timer_shrinks(bar):
    watch = Stopwatch()
    bar.trigger(watch)
    watch.tick(bar.attack_time)
    bar.update(watch)
    heights = []
    for _ in range(2):
        watch.tick(bar.regeneration_time / 4)
        bar.update(watch)
        heights.append(bar.timer_size[1])
    assert heights[0] > heights[1]
    assert bar.base_color == GREEN


def test_full_cycle_returns_to_available(bar):
    watch = Stopwatch()
    bar.trigger(watch)
    watch.tick(bar.attack_time)
    bar.update(watch)
    watch.tick(bar.regeneration_time)
    bar.update(watch)
    assert bar.phase is BarPhase.AVAILABLE
    assert bar.timer_size == (bar.boxsize, bar.boxsize)
    assert bar.base_color == GREY
    assert bar.timer_color == GREEN
    assert bar.current_image == bar.attack_image
    assert bar.trigger(watch) is True


def test_update_when_available_changes_nothing(bar):
    watch = Stopwatch(10.0)
    before = (bar.timer_size, bar.base_color, bar.phase)
    bar.update(watch)
    assert (bar.timer_size, bar.base_color, bar.phase) == before
    assert watch.elapsed == 10.0