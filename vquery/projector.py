import logging
from typing import Callable, TypeAlias

from vquery.errors import NotInitializedError
from vquery.query import NodeListQuery, NodeQuery, create_query
from vquery.selector import Selector
from vquery.vdom import VNode, VNodeLike

logger = logging.getLogger(__name__)

Render: TypeAlias = Callable[[], VNodeLike]


class TestProjector:
    """Stands in for a real projector and exposes the rendered tree to queries.

    The render function is called again on every resolution, so queries
    always see the latest render output. ``query`` and ``query_all`` search
    a virtual parent of the root, which lets the root vnode itself match.
    """

    # keeps pytest from collecting this class where tests import it
    __test__ = False

    _render: Render | None
    root: NodeQuery
    _query_start: NodeQuery

    def __init__(self, render: Render | None = None) -> None:
        self._render = render
        self.root = create_query(self._get_root_vnode)
        self._query_start = create_query(
            lambda: VNode(selector="__root__", children=[self._get_root_vnode()])
        )

    def _get_root_vnode(self) -> VNodeLike:
        if self._render is None:
            raise NotInitializedError()
        return self._render()

    def initialize(self, render: Render) -> None:
        logger.debug("initializing test projector with %r", render)
        self._render = render

    def uninitialize(self) -> None:
        logger.debug("uninitializing test projector")
        self._render = None

    def query(self, selector: Selector) -> NodeQuery:
        return self._query_start.query(selector)

    def query_all(self, selector: Selector) -> NodeListQuery:
        return self._query_start.query_all(selector)


def create_test_projector(render: Render | None = None) -> TestProjector:
    return TestProjector(render)
