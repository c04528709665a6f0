from typing import Any, Callable, Iterator, TypeAlias

from vquery.errors import NodeNotFoundError
from vquery.selector import Selector, compile_selector
from vquery.simulate import Simulator
from vquery.vdom import Predicate, Props, VNodeLike
from vquery.walker import collect_text_content, filter_descendants, find_all

GetVNode: TypeAlias = Callable[[], VNodeLike | None]
GetVNodes: TypeAlias = Callable[[], list[VNodeLike]]


def _at(vnodes: list[VNodeLike] | None, index: int) -> VNodeLike | None:
    if vnodes is None or not 0 <= index < len(vnodes):
        return None
    return vnodes[index]


class NodeQuery:
    """A re-resolvable reference to a single vnode.

    The wrapped accessor runs again on every resolution, so a handle created
    before a re-render reads the new tree. Nothing resolved is kept between
    calls. Construction never fails for a missing node; ``execute`` and the
    derived properties raise ``NodeNotFoundError`` and ``exists`` reports it.
    """

    _get_vnode: GetVNode
    _target_dom_node: Any
    _child_queries: dict[int, "NodeQuery"]

    def __init__(self, get_vnode: GetVNode, target_dom_node: Any = None) -> None:
        self._get_vnode = get_vnode
        self._target_dom_node = target_dom_node
        self._child_queries = {}

    def _search(self, predicate: Predicate) -> list[VNodeLike]:
        vnode = self._get_vnode()
        if vnode is None:
            return []
        return filter_descendants(vnode, predicate)

    def execute(self) -> VNodeLike:
        vnode = self._get_vnode()
        if vnode is None:
            raise NodeNotFoundError()
        return vnode

    def exists(self) -> bool:
        return self._get_vnode() is not None

    def query(self, selector: Selector) -> "NodeQuery":
        predicate = compile_selector(selector)
        return create_query(lambda: _at(self._search(predicate), 0))

    def query_all(self, selector: Selector) -> "NodeListQuery":
        predicate = compile_selector(selector)
        return create_collection_query(lambda: self._search(predicate))

    def find_all(self, selector: Selector) -> "NodeListQuery":
        """Like ``query_all``, but the resolved node itself may match too."""
        predicate = compile_selector(selector)

        def _scan() -> list[VNodeLike]:
            vnode = self._get_vnode()
            return [] if vnode is None else find_all(predicate, vnode)

        return create_collection_query(_scan)

    def find(self, selector: Selector) -> "NodeQuery":
        matches = self.find_all(selector)
        return create_query(lambda: _at(matches.execute(), 0))

    def get_child(self, index: int) -> "NodeQuery":
        def _child() -> VNodeLike | None:
            vnode = self._get_vnode()
            return None if vnode is None else _at(list(vnode.children or []), index)

        return create_query(_child)

    @property
    def text_content(self) -> str:
        return collect_text_content(self.execute())

    @property
    def vnode_selector(self) -> str:
        return self.execute().selector

    @property
    def properties(self) -> Props:
        properties = self.execute().properties
        return {} if properties is None else properties

    @property
    def children(self) -> list["NodeQuery"]:
        # the child handles resolve live, only the wrappers are reused
        count = len(self.execute().children or [])
        for index in range(len(self._child_queries), count):
            self._child_queries[index] = self.get_child(index)
        return [self._child_queries[index] for index in range(count)]

    @property
    def simulate(self) -> Simulator:
        return Simulator(self.execute(), self._target_dom_node)

    def set_target_dom_node(self, target: Any) -> None:
        self._target_dom_node = target

    def get_target_dom_node(self) -> Any:
        return self._target_dom_node


class NodeListQuery:
    _get_vnodes: GetVNodes

    def __init__(self, get_vnodes: GetVNodes) -> None:
        self._get_vnodes = get_vnodes

    def execute(self) -> list[VNodeLike]:
        return self._get_vnodes()

    def get_result(self, index: int) -> NodeQuery:
        return create_query(lambda: _at(self._get_vnodes(), index))

    def __getitem__(self, index: int) -> NodeQuery:
        return self.get_result(index)

    @property
    def length(self) -> int:
        return len(self._get_vnodes())

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[NodeQuery]:
        for index in range(self.length):
            yield self.get_result(index)


def create_query(get_vnode: GetVNode) -> NodeQuery:
    return NodeQuery(get_vnode)


def create_collection_query(get_vnodes: GetVNodes) -> NodeListQuery:
    return NodeListQuery(get_vnodes)


def query(vnode_tree: VNodeLike) -> NodeQuery:
    """Query a tree that was rendered once and will not change."""
    return create_query(lambda: vnode_tree)
