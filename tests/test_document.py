import io

import pytest

from json_flattener import (
    ArrayIndex,
    FlatMap,
    FlatDocument,
    JsonFlattener,
    JsonFlattenerError,
    JsonSyntaxError,
    NotYetParsedError,
    SourceUnreadableError,
)


class BrokenStream:
    def read(self):
        raise OSError("disk gone")


class TestParseErrors:

    def test_syntax_error_location(self):
        with pytest.raises(JsonSyntaxError) as exc_info:
            JsonFlattener("{ bad").parse()
        error = exc_info.value
        assert error.lineno == 1
        assert error.colno == 3
        assert error.pos == 2
        assert "line 1, column 3" in str(error)

    def test_syntax_error_on_later_line(self):
        with pytest.raises(JsonSyntaxError) as exc_info:
            JsonFlattener('{\n  "a": 1,\n  "b": \n}').parse()
        assert exc_info.value.lineno == 4
        assert exc_info.value.colno == 1

    def test_wrong_document(self):
        with pytest.raises(JsonSyntaxError):
            JsonFlattener("{ this: is a wrong JSON document").parse()

    @pytest.mark.parametrize("source", ["", "   ", None])
    def test_empty_document(self, source):
        with pytest.raises(JsonSyntaxError):
            JsonFlattener(source).parse()

    def test_nan_is_rejected(self):
        with pytest.raises(JsonSyntaxError) as exc_info:
            JsonFlattener('[1, NaN]').parse()
        assert exc_info.value.colno == 5

    def test_syntax_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            JsonFlattener("[").parse()

    def test_unreadable_stream(self):
        with pytest.raises(SourceUnreadableError) as exc_info:
            JsonFlattener(BrokenStream()).parse()
        assert isinstance(exc_info.value, OSError)
        assert isinstance(exc_info.value, JsonFlattenerError)

    def test_closed_stream(self):
        stream = io.StringIO('{"a": 1}')
        stream.close()
        with pytest.raises(SourceUnreadableError):
            JsonFlattener(stream).parse()

    def test_undecodable_binary_stream(self):
        with pytest.raises(SourceUnreadableError):
            JsonFlattener(io.BytesIO(b"[\xff]")).parse()

    def test_undecodable_bytes(self):
        with pytest.raises(SourceUnreadableError):
            JsonFlattener(b'{"a": "\xff"}').parse()

    def test_nan_after_string_containing_nan(self):
        with pytest.raises(JsonSyntaxError) as exc_info:
            JsonFlattener('{"s": "NaN", "v": NaN}').parse()
        assert exc_info.value.pos == 18
        assert exc_info.value.colno == 19

    def test_negative_infinity_location(self):
        with pytest.raises(JsonSyntaxError) as exc_info:
            JsonFlattener('{"s": "I\\"N",\n "v": -Infinity}').parse()
        assert exc_info.value.lineno == 2
        assert exc_info.value.colno == 7


class TestSources:

    def test_bytes(self):
        document = JsonFlattener('{"a": "é"}'.encode("utf-8")).parse()
        assert document.flat_map["/a"] == "é"

    def test_text_stream(self, simple_json):
        document = JsonFlattener(io.StringIO(simple_json)).parse()
        assert len(document.array_index) == 5

    def test_binary_stream(self, simple_file):
        with open(simple_file, "rb") as f:
            document = JsonFlattener(f).parse()
        assert document.flat_map["[1]/attribute1"] == "2"


class TestParseState:

    def test_flat_tree_before_parse(self, simple_json):
        flattener = JsonFlattener(simple_json)
        assert not flattener.parsed
        with pytest.raises(NotYetParsedError):
            flattener.flat_tree()

    def test_csv_before_parse(self, simple_json):
        with pytest.raises(NotYetParsedError, match="has not been parsed"):
            JsonFlattener(simple_json).to_csv("/")

    def test_document_before_parse(self):
        with pytest.raises(RuntimeError):
            JsonFlattener("[]").document

    def test_failed_parse_leaves_flattener_unparsed(self):
        flattener = JsonFlattener("{ bad")
        with pytest.raises(JsonSyntaxError):
            flattener.parse()
        assert not flattener.parsed
        with pytest.raises(NotYetParsedError):
            flattener.flat_tree()

    def test_parse_returns_cached_document(self, simple_json):
        flattener = JsonFlattener(simple_json)
        document = flattener.parse()
        assert flattener.parsed
        assert flattener.document is document
        assert isinstance(document, FlatDocument)

    def test_reparse_replaces_state(self):
        flattener = JsonFlattener('{"a": [1, 2]}')
        first = flattener.parse()
        second = flattener.parse(remove_nodes=True)
        assert flattener.document is second
        assert len(first) == 4
        assert len(second) == 2

    def test_reparse_of_consumed_stream_keeps_state(self):
        flattener = JsonFlattener(io.StringIO('{"a": 1}'))
        flattener.parse()
        with pytest.raises(JsonSyntaxError):
            flattener.parse()
        assert flattener.flat_tree() == "/={object}\n/a=1\n"

    def test_exports_do_not_change_document(self, simple):
        before = simple.flat_tree()
        simple.to_csv("/arrayB", ["id", "../attribute1"])
        simple.to_csv("/nonexistent")
        assert simple.flat_tree() == before


def test_document_is_read_only(simple):
    document = simple.document
    with pytest.raises(TypeError):
        document.flat_map["/new"] = "value"
    with pytest.raises(TypeError):
        document.flat_map.pop("[0]/attribute1")
    with pytest.raises(TypeError):
        document.array_index.add("/new", 1)
    assert document.flat_map["[0]/attribute1"] == "1"


def test_hand_built_document_is_frozen():
    flat_map = FlatMap([("/a", "1")])
    array_index = ArrayIndex()
    FlatDocument(flat_map, array_index)
    assert flat_map.frozen
    with pytest.raises(TypeError):
        flat_map["/b"] = "2"
