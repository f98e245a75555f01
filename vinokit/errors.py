"""Status codes reported by the inference runtime and the exceptions built from them."""

from __future__ import annotations

import enum


class Status(enum.IntEnum):
    """Status codes returned by the runtime's C interface."""

    OK = 0
    GENERAL_ERROR = -1
    NOT_IMPLEMENTED = -2
    NETWORK_NOT_LOADED = -3
    PARAMETER_MISMATCH = -4
    NOT_FOUND = -5
    OUT_OF_BOUNDS = -6
    UNEXPECTED = -7
    REQUEST_BUSY = -8
    RESULT_NOT_READY = -9
    NOT_ALLOCATED = -10
    INFER_NOT_STARTED = -11
    NETWORK_NOT_READ = -12
    INFER_CANCELLED = -13
    INVALID_C_PARAM = -14
    UNKNOWN_C_ERROR = -15
    NOT_IMPLEMENT_C_METHOD = -16
    UNKNOWN_EXCEPTION = -17


_STATUS_MESSAGES = {
    Status.GENERAL_ERROR: "general error",
    Status.NOT_IMPLEMENTED: "not implemented",
    Status.NETWORK_NOT_LOADED: "network not loaded",
    Status.PARAMETER_MISMATCH: "parameter mismatch",
    Status.NOT_FOUND: "not found",
    Status.OUT_OF_BOUNDS: "out of bounds",
    Status.UNEXPECTED: "unexpected",
    Status.REQUEST_BUSY: "request busy",
    Status.RESULT_NOT_READY: "result not ready",
    Status.NOT_ALLOCATED: "not allocated",
    Status.INFER_NOT_STARTED: "infer not started",
    Status.NETWORK_NOT_READ: "network not read",
    Status.INFER_CANCELLED: "infer cancelled",
    Status.INVALID_C_PARAM: "invalid C parameter",
    Status.UNKNOWN_C_ERROR: "unknown C error",
    Status.NOT_IMPLEMENT_C_METHOD: "not implemented C method",
    Status.UNKNOWN_EXCEPTION: "unknown exception",
}


class InferenceError(Exception):
    """An error status reported by the runtime.

    ``status`` is the matching :class:`Status`, or ``None`` when the code is
    not one the runtime documents; ``code`` always holds the raw integer.
    """

    def __init__(self, code: int | Status) -> None:
        try:
            status: Status | None = Status(code)
        except ValueError:
            status = None
        if status is Status.OK:
            raise ValueError("status OK does not describe an error")
        self.status = status
        self.code = int(code)
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.status is None:
            return f"undefined error code: {self.code}"
        return _STATUS_MESSAGES[self.status]


def check_status(status: int | Status) -> None:
    """Return quietly for ``OK``; raise :class:`InferenceError` for anything else."""
    if status == Status.OK:
        return None
    raise InferenceError(status)


class LoadingError(Exception):
    """A failure to locate or load the runtime's shared libraries."""

    class Kind(enum.Enum):
        SYSTEM_FAILURE = "system_failure"
        CANNOT_FIND_LIBRARY_PATH = "cannot_find_library_path"
        CANNOT_FIND_PLUGIN_PATH = "cannot_find_plugin_path"
        CANNOT_STRINGIFY_PATH = "cannot_stringify_path"

    def __init__(self, kind: LoadingError.Kind, detail: str | None = None) -> None:
        if not isinstance(kind, LoadingError.Kind):
            raise TypeError(f"expected a LoadingError.Kind, got {kind!r}")
        self.kind = kind
        self.detail = detail
        super().__init__(self._describe())

    def _describe(self) -> str:
        kind = LoadingError.Kind
        if self.kind is kind.SYSTEM_FAILURE:
            return f"system failed to load shared libraries: {self.detail or ''}"
        if self.kind is kind.CANNOT_FIND_LIBRARY_PATH:
            return "cannot find path to shared libraries"
        if self.kind is kind.CANNOT_FIND_PLUGIN_PATH:
            return "cannot find path to XML plugin configuration"
        return "unable to convert path to a UTF-8 string"


class SetupError(Exception):
    """A setup failure caused by either an inference or a loading error."""

    def __init__(self, cause: InferenceError | LoadingError) -> None:
        if isinstance(cause, InferenceError):
            message = f"inference error: {cause}"
        elif isinstance(cause, LoadingError):
            message = f"library loading error: {cause}"
        else:
            raise TypeError(f"cannot build a setup error from {cause!r}")
        self.cause = cause
        super().__init__(message)