import pytest

from vquery import create_test_projector
from vquery.errors import NodeNotFoundError, NotInitializedError
from vquery.projector import TestProjector
from vquery.vdom import VNode, h


def render_list(count: int) -> VNode:
    return h("ul.list", {}, [h("li.item", {}, [str(i)]) for i in range(count)])


def test_query_from_projector() -> None:
    projector = create_test_projector(lambda: render_list(2))

    assert projector.root.vnode_selector == "ul.list"
    assert projector.query(".list").exists()
    assert projector.query_all(".item").length == 2
    assert projector.query_all(".item")[1].text_content == "1"


def test_render_is_called_on_every_resolution() -> None:
    renders = []

    def render() -> VNode:
        renders.append(None)
        return render_list(1)

    projector = TestProjector(render)
    item = projector.query(".item")

    assert renders == []
    item.execute()
    item.execute()
    assert len(renders) == 2


def test_rebinding_render_function() -> None:
    projector = TestProjector(lambda: render_list(1))
    items = projector.query_all(".item")
    last = projector.root.get_child(2)

    assert items.length == 1
    assert not last.exists()

    projector.initialize(lambda: render_list(3))

    assert items.length == 3
    assert last.text_content == "2"


def test_not_initialized() -> None:
    projector = TestProjector()
    item = projector.query(".item")

    with pytest.raises(NotInitializedError):
        item.execute()
    with pytest.raises(NotInitializedError):
        projector.root.exists()

    projector.initialize(lambda: render_list(1))

    assert item.text_content == "0"


def test_uninitialize() -> None:
    projector = TestProjector(lambda: render_list(1))
    resolved = projector.query(".item").execute()
    pending = projector.query(".item")

    projector.uninitialize()

    assert resolved.selector == "li.item"
    with pytest.raises(NotInitializedError):
        pending.execute()
    with pytest.raises(NotInitializedError):
        projector.query_all(".item").length


def test_missing_node_from_projector() -> None:
    projector = TestProjector(lambda: render_list(0))

    assert not projector.query(".item").exists()
    with pytest.raises(NodeNotFoundError):
        projector.query(".item").text_content
