from dataclasses import dataclass
from typing import Any, Callable

import pytest

from vquery import TestProjector
from vquery.vdom import VNode, h

ENTER = 13


@dataclass(frozen=True)
class CountUp:
    value: int = 1


@dataclass(frozen=True)
class CountDown:
    value: int = 1


@dataclass(frozen=True)
class Rename:
    name: str


Msg = CountUp | CountDown | Rename
Dispatch = Callable[[Msg], None]


def update(msg: Msg, state: dict[str, Any]) -> dict[str, Any]:
    match msg:
        case CountUp(value):
            return {**state, "count": state["count"] + value}
        case CountDown(value):
            return {**state, "count": state["count"] - value}
        case Rename(name):
            return {**state, "name": name}


def view(state: dict[str, Any], dispatch: Dispatch) -> VNode:
    def on_name_input(event: Any) -> None:
        dispatch(Rename(event.target.value))

    def on_name_keydown(event: Any) -> None:
        if event.which == ENTER:
            event.prevent_default()

    return h(
        "div.counter",
        {},
        [
            h("h1.title", {}, [f"{state['name']}: ", str(state["count"])]),
            h("button.up", {"onmousedown": lambda _: dispatch(CountUp())}),
            h("button.down", {"onmousedown": lambda _: dispatch(CountDown())}),
            h(
                "input.name",
                {"oninput": on_name_input, "onkeydown": on_name_keydown},
            ),
        ],
    )


@pytest.fixture
def projector() -> TestProjector:
    state: dict[str, Any] = {"count": 0, "name": "counter"}

    def dispatch(msg: Msg) -> None:
        nonlocal state
        state = update(msg, state)

    return TestProjector(lambda: view(state, dispatch))


def test_count_up_and_down(projector: TestProjector) -> None:
    title = projector.query(".title")
    up = projector.query("button.up")
    down = projector.query("button.down")

    assert title.text_content == "counter: 0"
    up.simulate.mouse_down()
    up.simulate.mouse_down()
    assert title.text_content == "counter: 2"
    down.simulate.mouse_down()
    assert title.text_content == "counter: 1"


def test_typing_a_name(projector: TestProjector) -> None:
    name = projector.query(".name")

    name.simulate.key_press(ord("x"), "", "x")

    assert projector.query(".title").text_content == "x: 0"


def test_enter_is_prevented(projector: TestProjector) -> None:
    name = projector.query(".name")

    assert name.simulate.key_down(ENTER).default_prevented
    assert not name.simulate.key_down(ord("a")).default_prevented
