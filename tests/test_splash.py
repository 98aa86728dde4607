import pytest

from gaiasys.splash import (
    SPLASH_BACKGROUND_COLOR,
    SPLASH_DURATION_SECS,
    SPLASH_FADE_DURATION_SECS,
    ImageNodeFadeInOut,
    SplashScreen,
    SplashTimer,
)
from gaiasys.states import Screen


def make_fade(t=0.0):
    return ImageNodeFadeInOut(
        total_duration=SPLASH_DURATION_SECS, fade_duration=SPLASH_FADE_DURATION_SECS, t=t
    )


def test_alpha_zero_at_start_and_end():
    assert make_fade(0.0).alpha() == 0.0
    assert make_fade(SPLASH_DURATION_SECS).alpha() == pytest.approx(0.0)


def test_alpha_full_in_middle():
    assert make_fade(SPLASH_DURATION_SECS / 2).alpha() == 1.0


@pytest.mark.parametrize("t", [0.1, 0.2, 0.45, 0.7])
def test_alpha_symmetric(t):
    assert make_fade(t).alpha() == pytest.approx(make_fade(SPLASH_DURATION_SECS - t).alpha())


def test_alpha_bounded_and_clamped_outside_range():
    for t in (-1.0, 0.05, 0.3, 1.0, 1.7, 5.0):
        assert 0.0 <= make_fade(t).alpha() <= 1.0
    assert make_fade(-1.0).alpha() == 0.0


def test_alpha_rises_during_fade_in():
    assert make_fade(0.1).alpha() < make_fade(0.2).alpha() < make_fade(0.4).alpha()


def test_tick_advances():
    fade = make_fade()
    fade.tick(0.25)
    fade.tick(0.25)
    assert fade.t == pytest.approx(0.5)


def test_invalid_durations():
    with pytest.raises(ValueError):
        ImageNodeFadeInOut(total_duration=0.0, fade_duration=0.1)
    with pytest.raises(ValueError):
        ImageNodeFadeInOut(total_duration=1.0, fade_duration=0.0)


def test_timer_finishes_once():
    timer = SplashTimer()
    assert timer.tick(SPLASH_DURATION_SECS / 2) is False
    assert timer.tick(SPLASH_DURATION_SECS) is True
    assert timer.elapsed == SPLASH_DURATION_SECS
    assert timer.tick(1.0) is False
    assert timer.finished is True
    assert timer.just_finished is False


def test_screen_continues_after_duration():
    screen = SplashScreen()
    assert screen.update(SPLASH_DURATION_SECS / 3) is None
    assert screen.update(SPLASH_DURATION_SECS) is Screen.LOADING
    assert screen.update(0.1) is None


def test_escape_skips_splash():
    screen = SplashScreen()
    assert screen.update(0.01, escape_pressed=True) is Screen.LOADING


def test_update_sets_image_alpha():
    screen = SplashScreen()
    screen.update(SPLASH_DURATION_SECS / 2)
    assert screen.image_alpha == screen.fade.alpha()
    assert screen.image_alpha == 1.0


def test_root_node():
    screen = SplashScreen()
    assert screen.root.background == SPLASH_BACKGROUND_COLOR
    assert screen.root.state_scope is Screen.SPLASH
    assert [child.name for child in screen.root.children] == ["Splash image"]