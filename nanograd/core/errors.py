# nanograd/core/errors.py


class NanogradError(Exception):
    """Base class for errors raised by the engine."""


class DanglingReferenceError(NanogradError, RuntimeError):
    """
    A backward rule ran after one of the nodes it refers to was reclaimed.

    Only raised when the active EngineConfig has ``strict=True``; in the
    default permissive mode the contribution is skipped instead.
    """

    def __init__(self, op_tag: str, role: str):
        self.op_tag = op_tag
        self.role = role
        super().__init__(
            f"backward rule for '{op_tag}' lost its {role} node; "
            f"the graph was dropped before backward() ran"
        )
