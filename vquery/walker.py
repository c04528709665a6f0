"""Pre-order traversal over virtual node trees.

Two search entry points exist: ``find_all`` tests the starting node itself,
``filter_descendants`` only tests the nodes below it. Handle queries use the
latter so that ``node.query("div")`` never returns ``node``.
"""

from vquery.vdom import Predicate, VNodeLike


def find_all(
    predicate: Predicate,
    root: VNodeLike,
    results: list[VNodeLike] | None = None,
) -> list[VNodeLike]:
    if results is None:
        results = []
    if predicate(root):
        results.append(root)
    for child in root.children or []:
        find_all(predicate, child, results)
    return results


def filter_descendants(root: VNodeLike, predicate: Predicate) -> list[VNodeLike]:
    results: list[VNodeLike] = []
    for child in root.children or []:
        find_all(predicate, child, results)
    return results


def _collect_text(vnode: VNodeLike, results: list[str]) -> list[str]:
    text = getattr(vnode, "text", None)
    if vnode.selector == "":
        results.append(text or "")
        return results
    if text:
        results.append(text)
    for child in vnode.children or []:
        _collect_text(child, results)
    return results


def collect_text_content(vnode: VNodeLike) -> str:
    return "".join(_collect_text(vnode, []))
