import logging
from dataclasses import dataclass, field
from types import SimpleNamespace
from typing import Any, Callable, TypeVar

from vquery.errors import MissingHandlerError
from vquery.vdom import VNodeLike

logger = logging.getLogger(__name__)

E = TypeVar("E", bound="Event")

Handler = Callable[[Any], Any]


@dataclass(slots=True)
class Event:
    target: Any
    default_prevented: bool = field(default=False, init=False)
    propagation_stopped: bool = field(default=False, init=False)

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


@dataclass(slots=True)
class KeyboardEvent(Event):
    which: int


@dataclass(slots=True)
class MouseEvent(Event):
    page_x: float | None = None
    page_y: float | None = None


@dataclass(slots=True)
class FocusEvent(Event):
    ...


def create_event(target: Any) -> Event:
    return Event(target)


def create_key_event(which: int, target: Any) -> KeyboardEvent:
    return KeyboardEvent(target, which)


def create_mouse_event(
    target: Any, page_x: float | None = None, page_y: float | None = None
) -> MouseEvent:
    return MouseEvent(target, page_x, page_y)


def create_focus_event(target: Any) -> FocusEvent:
    return FocusEvent(target)


class Simulator:
    """A small facade that fires simple events at the handlers of a vnode.

    Each single-action method calls the matching ``on...`` property directly
    and returns the event so tests can inspect ``default_prevented``. These
    methods raise ``MissingHandlerError`` when the handler is not wired, which
    almost always means the test targets the wrong node. ``key_press`` is the
    exception: it only fires the handlers that exist.

    Anything not covered here can be simulated by calling
    ``handle.properties["on..."](event)`` yourself.
    """

    _vnode: VNodeLike
    _target_dom_node: Any

    def __init__(self, vnode: VNodeLike, target_dom_node: Any = None) -> None:
        self._vnode = vnode
        self._target_dom_node = target_dom_node

    def _target(self, target: Any) -> Any:
        return self._target_dom_node if target is None else target

    def _handler(self, name: str) -> Handler | None:
        return (self._vnode.properties or {}).get(name)

    def _dispatch(self, name: str, event: E) -> E:
        handler = self._handler(name)
        if handler is None:
            raise MissingHandlerError(name, self._vnode.selector)
        logger.debug("dispatching %s to %r", name, self._vnode.selector)
        handler(event)
        return event

    def key_down(self, key_code: int, target: Any = None) -> KeyboardEvent:
        return self._dispatch(
            "onkeydown", create_key_event(key_code, self._target(target))
        )

    def key_up(self, key_code: int, target: Any = None) -> KeyboardEvent:
        return self._dispatch(
            "onkeyup", create_key_event(key_code, self._target(target))
        )

    def mouse_down(
        self,
        target: Any = None,
        page_x: float | None = None,
        page_y: float | None = None,
    ) -> MouseEvent:
        return self._dispatch(
            "onmousedown", create_mouse_event(self._target(target), page_x, page_y)
        )

    def mouse_up(
        self,
        target: Any = None,
        page_x: float | None = None,
        page_y: float | None = None,
    ) -> MouseEvent:
        return self._dispatch(
            "onmouseup", create_mouse_event(self._target(target), page_x, page_y)
        )

    def input(self, target: Any = None) -> Event:
        return self._dispatch("oninput", create_event(self._target(target)))

    def change(self, target: Any = None) -> Event:
        return self._dispatch("onchange", create_event(self._target(target)))

    def focus(self, target: Any = None) -> FocusEvent:
        return self._dispatch("onfocus", create_focus_event(self._target(target)))

    def blur(self, target: Any = None) -> FocusEvent:
        return self._dispatch("onblur", create_focus_event(self._target(target)))

    def key_press(
        self,
        key_code: int,
        value_before: str,
        value_after: str,
        target: Any = None,
    ) -> None:
        """Emulate one keystroke that changes the value of a text field."""
        target = self._target(target)
        if target is None:
            target = SimpleNamespace()
        target.value = value_before
        if onkeydown := self._handler("onkeydown"):
            onkeydown(create_key_event(key_code, target))
        target.value = value_after
        if onkeyup := self._handler("onkeyup"):
            onkeyup(create_key_event(key_code, target))
        if oninput := self._handler("oninput"):
            oninput(create_event(target))
