"""Tests for loading pug-parser JSON into nodes."""

import json

import pytest

from pugjsx import MalformedTreeError, transpile
from pugjsx.nodes import Attr, Block, Tag, Text, dump_tree, load_file, load_tree

# parse(lex('tag(v-for="item in items")\n  | {{ item.name }}'))
PUG_PARSER_OUTPUT = {
    "type": "Block",
    "nodes": [
        {
            "type": "Tag",
            "name": "tag",
            "selfClosing": False,
            "block": {
                "type": "Block",
                "nodes": [
                    {
                        "type": "Text",
                        "val": "{{ item.name }}",
                        "line": 3,
                        "column": 5,
                        "filename": "target.pug",
                    }
                ],
                "line": 2,
                "filename": "target.pug",
            },
            "attrs": [
                {
                    "name": "v-for",
                    "val": '"item in items"',
                    "line": 2,
                    "column": 5,
                    "filename": "target.pug",
                    "mustEscape": True,
                }
            ],
            "attributeBlocks": [],
            "isInline": False,
            "line": 2,
            "column": 1,
            "filename": "target.pug",
        }
    ],
    "line": 0,
    "filename": "target.pug",
}


class TestLoadTree:
    def test_structure(self):
        tree = load_tree(PUG_PARSER_OUTPUT)
        assert isinstance(tree, Block)
        (node,) = tree.nodes
        assert isinstance(node, Tag)
        assert node.name == "tag"
        assert node.attrs == (
            Attr(name="v-for", val='"item in items"', line=2, column=5, filename="target.pug"),
        )
        assert node.block.nodes[0] == Text(
            val="{{ item.name }}", line=3, column=5, filename="target.pug"
        )
        assert node.location == "target.pug:2:1"

    def test_from_json_text(self):
        tree = load_tree(json.dumps(PUG_PARSER_OUTPUT))
        assert transpile(tree) == "{items.map((item) => (<tag>{ item.name }</tag>))}"

    def test_boolean_attribute(self):
        data = {
            "type": "Block",
            "nodes": [{"type": "Tag", "name": "a", "attrs": [{"name": "x", "val": True}]}],
        }
        assert load_tree(data).nodes[0].attrs[0].val is True

    def test_missing_block_defaults_to_empty(self):
        tree = load_tree({"type": "Block", "nodes": [{"type": "Tag", "name": "br"}]})
        assert tree.nodes[0].block == Block()

    @pytest.mark.parametrize("node_type", ["Code", "Comment", "Mixin", None])
    def test_unsupported_node_type(self, node_type):
        data = {"type": "Block", "nodes": [{"type": node_type, "line": 7}]}
        with pytest.raises(MalformedTreeError) as exc_info:
            load_tree(data)
        assert exc_info.value.node_type == str(node_type)
        assert exc_info.value.location == "<template>:7"

    def test_tag_without_name(self):
        data = {"type": "Block", "nodes": [{"type": "Tag", "attrs": [], "line": 5}]}
        with pytest.raises(MalformedTreeError) as exc_info:
            load_tree(data)
        assert exc_info.value.node_type == "Tag"
        assert exc_info.value.reason == "missing 'name'"
        assert exc_info.value.location == "<template>:5"

    def test_attribute_without_name(self):
        data = {"type": "Block", "nodes": [{"type": "Tag", "name": "a", "attrs": [{"val": True}]}]}
        with pytest.raises(MalformedTreeError) as exc_info:
            load_tree(data)
        assert exc_info.value.node_type == "Attr"

    def test_root_must_be_block(self):
        with pytest.raises(MalformedTreeError):
            load_tree({"type": "Text", "val": "x"})

    def test_non_mapping_node(self):
        with pytest.raises(MalformedTreeError):
            load_tree({"type": "Block", "nodes": ["text"]})

    def test_invalid_json(self):
        with pytest.raises(json.JSONDecodeError):
            load_tree("{not json")


class TestLoadFile:
    def test_load_file(self, tmp_path):
        path = tmp_path / "target.json"
        path.write_text(json.dumps(PUG_PARSER_OUTPUT), encoding="utf-8")
        assert load_file(path) == load_tree(PUG_PARSER_OUTPUT)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_file(tmp_path / "nope.json")


class TestDumpTree:
    def test_dump_drops_locations(self):
        dumped = json.loads(dump_tree(load_tree(PUG_PARSER_OUTPUT)))
        assert dumped == {
            "type": "Block",
            "nodes": [
                {
                    "type": "Tag",
                    "name": "tag",
                    "attrs": [{"name": "v-for", "val": '"item in items"'}],
                    "block": {"type": "Block", "nodes": [{"type": "Text", "val": "{{ item.name }}"}]},
                }
            ],
        }

    def test_dump_reloads_to_same_output(self):
        tree = load_tree(PUG_PARSER_OUTPUT)
        assert transpile(load_tree(dump_tree(tree))) == transpile(tree)
