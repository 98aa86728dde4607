from gaiasys.screens import (
    ScreenStates,
    credits_screen,
    loading_screen,
    title_screen,
)
from gaiasys.states import Screen
from gaiasys.widgets import Node


def _button_labels(root):
    return [child.children[0].text for child in root.children if child.is_button]


def test_first_transition_enters_starting_screen_once():
    calls = []
    states = ScreenStates()
    states.on_enter(Screen.SPLASH, lambda: calls.append("splash"))
    assert states.apply_transition() is Screen.SPLASH
    assert states.apply_transition() is None
    assert calls == ["splash"]


def test_transition_runs_exit_then_enter():
    calls = []
    states = ScreenStates()
    states.on_exit(Screen.SPLASH, lambda: calls.append("exit splash"))
    states.on_enter(Screen.LOADING, lambda: calls.append("enter loading"))
    states.apply_transition()
    states.set_next(Screen.LOADING)
    assert states.current is Screen.SPLASH
    assert states.apply_transition() is Screen.LOADING
    assert states.current is Screen.LOADING
    assert states.next is None
    assert calls == ["exit splash", "enter loading"]


def test_scoped_entities_are_removed_on_exit():
    states = ScreenStates(current=Screen.LOADING)
    keep = Node(name="keep")
    states.on_enter(Screen.LOADING, loading_screen)
    states.on_enter(Screen.LOADING, lambda: keep)
    states.apply_transition()
    assert len(states.entities) == 2
    states.set_next(Screen.TITLE)
    states.apply_transition()
    assert states.entities == [keep]


def test_loading_screen():
    root = loading_screen()
    assert root.state_scope is Screen.LOADING
    assert root.children[0].text == "Loading..."
    assert root.children[0].justify_content == "center"


def test_title_screen_buttons():
    assert _button_labels(title_screen(True)) == ["Tutorial", "Start Game", "Credits", "Exit"]
    without_exit = title_screen(False)
    assert _button_labels(without_exit) == ["Tutorial", "Start Game", "Credits"]
    assert without_exit.state_scope is Screen.TITLE


def test_credits_screen_content():
    root = credits_screen()
    texts = [c.text if c.text is not None else c.children[0].text for c in root.children]
    assert texts[0] == "Made by"
    assert "Assets" in texts
    assert "Music - CC BY 3.0 by Kevin MacLeod" in texts
    assert root.children[-1].is_button
    assert texts[-1] == "Back"
    assert root.state_scope is Screen.CREDITS