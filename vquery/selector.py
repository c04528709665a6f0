from vquery.errors import InvalidSelectorError
from vquery.vdom import Predicate, VNodeLike

Selector = str | Predicate

_FRAGMENT_STARTS = (".", "#")


def _fragment_predicate(selector: str) -> Predicate:
    is_fragment = selector.startswith(_FRAGMENT_STARTS)

    def _match(vnode: VNodeLike) -> bool:
        vnode_selector = vnode.selector
        index = vnode_selector.find(selector)
        if not (index > 0 if is_fragment else index == 0):
            return False
        next_char = vnode_selector[index + len(selector) : index + len(selector) + 1]
        return next_char in ("", *_FRAGMENT_STARTS)

    return _match


def compile_selector(selector: Selector) -> Predicate:
    """Turn a selector into a predicate over a single virtual node.

    Strings are matched as a tag (``div``), class (``.foo``) or id (``#bar``)
    fragment of the node's selector. Only the first occurrence of the
    fragment is considered, and it has to end at a fragment boundary so that
    ``div`` does not match ``divider``.
    """
    match selector:
        case str():
            return _fragment_predicate(selector)
        case _ if callable(selector):
            return selector
        case _:
            raise InvalidSelectorError(selector)
