"""Tests for compile errors: kinds, locations and compact formatting."""

import pytest

from pugjsx import (
    ErrorCode,
    InvalidBindingError,
    InvalidDirectiveError,
    MalformedTreeError,
    TranspileError,
    UnknownDirectiveError,
)
from pugjsx.analysis import parse_iteration
from pugjsx.nodes import Attr, Block, Node, Tag, Text

from tests.builders import root, tag, text


class TestErrorKinds:
    """Each invalid input raises its own error and aborts the compile."""

    def test_unknown_node_type(self, compiler):
        with pytest.raises(MalformedTreeError) as exc_info:
            compiler.compile(root(tag("a", Node(line=3))))
        assert exc_info.value.node_type == "Node"

    def test_foreign_object(self, compiler):
        with pytest.raises(MalformedTreeError):
            compiler.compile(Block(nodes=({"type": "Tag"},)))

    def test_v_if_without_value(self, compiler):
        with pytest.raises(InvalidDirectiveError):
            compiler.compile(root(tag("a", attrs=[("v-if", True)])))

    def test_v_for_without_value(self, compiler):
        with pytest.raises(InvalidDirectiveError):
            compiler.compile(root(tag("a", attrs=[("v-for", True)])))

    def test_v_for_bad_grammar(self, compiler):
        with pytest.raises(InvalidDirectiveError) as exc_info:
            compiler.compile(root(tag("a", attrs=[("v-for", '"item of items"')])))
        assert exc_info.value.value == '"item of items"'

    def test_slot_holder_with_v_for_bad_grammar(self, compiler):
        slot = tag("template", attrs=[("v-slot:a", True), ("v-for", '"nope"')])
        with pytest.raises(InvalidDirectiveError):
            compiler.compile(root(tag("a", slot)))

    def test_default_slot_is_unknown(self, compiler):
        slot = tag("template", text("x"), attrs=[("v-slot", "'props'")])
        with pytest.raises(UnknownDirectiveError) as exc_info:
            compiler.compile(root(tag("a", slot)))
        assert exc_info.value.directive == "v-slot"

    def test_unquoted_binding(self, compiler):
        with pytest.raises(InvalidBindingError):
            compiler.compile(root(tag("a", attrs=[(":href", "url")])))

    def test_error_deep_in_tree_aborts_everything(self, compiler):
        tree = root(tag("ok"), tag("div", tag("p", attrs=[("v-if", False)])), tag("never"))
        with pytest.raises(TranspileError):
            compiler.compile(tree)

    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (MalformedTreeError("Foo"), ErrorCode.MALFORMED_TREE),
            (UnknownDirectiveError("v-x"), ErrorCode.UNKNOWN_DIRECTIVE),
            (InvalidDirectiveError("v-if", True), ErrorCode.INVALID_DIRECTIVE),
            (InvalidBindingError(":a", "b"), ErrorCode.INVALID_BINDING),
        ],
    )
    def test_error_codes(self, error, code):
        assert isinstance(error, TranspileError)
        assert error.code is code


class TestErrorCode:
    def test_docs_url(self):
        assert ErrorCode.INVALID_BINDING.docs_url.endswith("#p-bnd-001")

    def test_category(self):
        assert ErrorCode.MALFORMED_TREE.category == "tree"
        assert ErrorCode.UNKNOWN_DIRECTIVE.category == "directive"
        assert ErrorCode.INVALID_BINDING.category == "binding"


class TestLocations:
    def test_location_from_tag(self, compiler):
        node = Tag(
            name="a",
            attrs=(Attr(name="v-if", val=True),),
            line=4,
            column=3,
            filename="page.pug",
        )
        with pytest.raises(InvalidDirectiveError) as exc_info:
            compiler.compile(Block(nodes=(node,)))
        assert exc_info.value.location == "page.pug:4:3"
        assert "page.pug:4:3" in str(exc_info.value)

    def test_location_without_filename(self):
        assert Text(val="x", line=2).location == "<template>:2"

    def test_no_location(self):
        error = UnknownDirectiveError("v-x")
        assert error.location is None
        assert str(error) == "Unknown vue directive: v-x"


class TestFormatCompact:
    def test_plain_format(self, no_colors):
        node = Tag(name="a", line=3, column=9, filename="page.pug")
        error = InvalidBindingError(":href", "url", node=node)
        assert error.format_compact() == (
            "P-BND-001: Invalid binding value for ':href': url\n"
            "  --> page.pug:3:9\n"
            '  Hint: Quote the bound expression: :href="url"\n'
            "  Docs: https://pugjsx.readthedocs.io/en/latest/errors.html#p-bnd-001"
        )

    def test_iteration_hint(self, no_colors):
        with pytest.raises(InvalidDirectiveError) as exc_info:
            parse_iteration(Attr(name="v-for", val="x"))
        assert "Hint: v-for expects" in exc_info.value.format_compact()

    def test_colored_format_strips_to_plain(self, monkeypatch):
        from pugjsx import terminal

        monkeypatch.setattr(terminal, "_USE_COLORS", True)
        error = UnknownDirectiveError("v-x")
        colored = error.format_compact()
        assert "\033[" in colored
        assert terminal.strip_colors(colored).startswith("P-DIR-001: Unknown vue directive: v-x")
