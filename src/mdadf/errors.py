"""Error hierarchy for mdadf.

Converting text to a document never fails, so nothing here is raised on
the markdown or plain-text paths.  These errors cover decoding
rich-text bodies received as wire dicts (see
:mod:`mdadf.converter.adf_loader`).

Every error carries a machine-readable ``code`` (from :class:`ErrorCode`),
a human-readable ``message``, an optional structured ``context`` dict and
an optional ``cause``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error mdadf can raise."""

    SCHEMA_ERROR = "SCHEMA_ERROR"
    UNSUPPORTED_NODE = "UNSUPPORTED_NODE"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class MdAdfError(Exception):
    """Base exception for all mdadf errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
        Keys are documented per subclass.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Decoding errors
# ---------------------------------------------------------------------------

class MdAdfSchemaError(MdAdfError):
    """A wire dict does not have the shape of a document node.

    Raised for missing or ill-typed fields, a wrong ``version``, a heading
    level outside 1 to 6, or a list item that does not hold exactly one
    paragraph.

    Context keys: ``path`` (JSON-pointer-like location), ``node_type``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.SCHEMA_ERROR,
            message=message,
            context=context,
            cause=cause,
        )


class MdAdfUnsupportedNodeError(MdAdfSchemaError):
    """A wire dict names a node or mark type outside the supported set
    (for example ``table``, ``rule`` or ``mention``).

    Context keys: ``path``, ``node_type``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        MdAdfError.__init__(
            self,
            code=ErrorCode.UNSUPPORTED_NODE,
            message=message,
            context=context,
            cause=cause,
        )
