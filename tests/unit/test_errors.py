"""Tests for the error hierarchy."""

from mdadf.errors import (
    ErrorCode,
    MdAdfError,
    MdAdfSchemaError,
    MdAdfUnsupportedNodeError,
)


class TestErrorCode:

    def test_codes_are_strings(self):
        assert ErrorCode.SCHEMA_ERROR == "SCHEMA_ERROR"
        assert ErrorCode.UNSUPPORTED_NODE == "UNSUPPORTED_NODE"


class TestHierarchy:

    def test_schema_error(self):
        err = MdAdfSchemaError("bad", context={"path": "/x"})
        assert isinstance(err, MdAdfError)
        assert err.code == ErrorCode.SCHEMA_ERROR
        assert err.message == "bad"
        assert err.context == {"path": "/x"}
        assert str(err) == "bad"

    def test_unsupported_node_error(self):
        err = MdAdfUnsupportedNodeError("nope", context={"node_type": "table"})
        assert isinstance(err, MdAdfSchemaError)
        assert err.code == ErrorCode.UNSUPPORTED_NODE

    def test_context_defaults_to_empty(self):
        assert MdAdfSchemaError("x").context == {}


class TestCause:

    def test_cause_is_chained(self):
        root = KeyError("type")
        err = MdAdfSchemaError("missing", cause=root)
        assert err.cause is root
        assert err.__cause__ is root

    def test_repr(self):
        err = MdAdfSchemaError("m", context={"path": "/a"})
        text = repr(err)
        assert text.startswith("MdAdfSchemaError(code=")
        assert "message='m'" in text
        assert text.endswith("context={'path': '/a'})")

    def test_repr_without_context(self):
        assert "context" not in repr(MdAdfError("C", "m"))
