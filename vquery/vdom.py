from dataclasses import dataclass
from typing import Any, Callable, MutableMapping, Protocol, Sequence, TypeAlias

Props: TypeAlias = MutableMapping[str, Any]


class VNodeLike(Protocol):
    selector: str
    properties: Props | None
    children: Sequence["VNodeLike"] | None
    text: str | None


Predicate: TypeAlias = Callable[[VNodeLike], bool]


@dataclass(slots=True, frozen=True)
class VNode:
    selector: str
    properties: Props | None = None
    children: list["VNode"] | None = None
    text: str | None = None


Child: TypeAlias = VNode | str


def text(value: str) -> VNode:
    return VNode(selector="", text=value)


def h(
    selector: str,
    properties: Props | None = None,
    children: list[Child] | None = None,
) -> VNode:
    if children is None:
        return VNode(selector=selector, properties=properties)
    return VNode(
        selector=selector,
        properties=properties,
        children=[text(c) if isinstance(c, str) else c for c in children],
    )
