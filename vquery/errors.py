class VQueryError(Exception):
    """Base class for every error raised by vquery."""


class InvalidSelectorError(VQueryError, TypeError):
    def __init__(self, selector: object) -> None:
        super().__init__(f"Invalid selector {selector!r}")
        self.selector = selector


class NodeNotFoundError(VQueryError, LookupError):
    def __init__(self, message: str = "Query did not match a VNode") -> None:
        super().__init__(message)


class NotInitializedError(VQueryError, RuntimeError):
    def __init__(self, message: str = "TestProjector is not initialized") -> None:
        super().__init__(message)


class MissingHandlerError(VQueryError, KeyError):
    def __init__(self, handler: str, vnode_selector: str) -> None:
        super().__init__(f"{vnode_selector!r} has no {handler} handler")
        self.handler = handler
        self.vnode_selector = vnode_selector

    def __str__(self) -> str:
        return str(self.args[0])
