from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version(__name__)
except PackageNotFoundError:
    __version__: str = "unknown"

from .errors import (
    InvalidSelectorError,
    MissingHandlerError,
    NodeNotFoundError,
    NotInitializedError,
    VQueryError,
)
from .projector import TestProjector, create_test_projector
from .query import NodeListQuery, NodeQuery, query
from .simulate import Event, FocusEvent, KeyboardEvent, MouseEvent, Simulator
from .vdom import VNode, h

__all__ = [
    "Event",
    "FocusEvent",
    "InvalidSelectorError",
    "KeyboardEvent",
    "MissingHandlerError",
    "MouseEvent",
    "NodeListQuery",
    "NodeNotFoundError",
    "NodeQuery",
    "NotInitializedError",
    "Simulator",
    "TestProjector",
    "VNode",
    "VQueryError",
    "create_test_projector",
    "h",
    "query",
]
