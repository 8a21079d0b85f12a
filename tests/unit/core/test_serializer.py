from __future__ import annotations

"""
Unit tests for forest serialization.
"""

import json

from gittree.core.serializer import dump_data, dump_forest, forest_to_data
from gittree.domain.tree_models import DirNode, FileNode


def test_file_and_directory_shapes():
    forest = [
        FileNode(name="a.txt", full_path="a.txt"),
        DirNode(name="d", files=[FileNode(name="b", full_path="d/b")]),
    ]

    assert forest_to_data(forest) == [
        {"name": "a.txt", "fullPath": "a.txt"},
        {"name": "d", "files": [{"name": "b", "fullPath": "d/b"}]},
    ]


def test_dump_is_compact_with_fixed_key_order():
    forest = [DirNode(name="a", files=[FileNode(name="c.txt", full_path="a/c.txt")])]

    assert dump_forest(forest) == '[{"name":"a","files":[{"name":"c.txt","fullPath":"a/c.txt"}]}]'


def test_non_ascii_names_are_written_verbatim():
    out = dump_forest([FileNode(name="café.md", full_path="docs/café.md")])

    assert "café.md" in out
    assert "\\u" not in out


def test_reserializing_output_is_byte_identical():
    forest = [
        DirNode(name="src", files=[
            DirNode(name="pkg", files=[FileNode(name="ñ.py", full_path="src/pkg/ñ.py")]),
            FileNode(name='quote".txt', full_path='src/quote".txt'),
        ]),
        DirNode(name="empty"),
    ]
    first = dump_forest(forest)

    assert dump_data(json.loads(first)) == first


def test_lone_surrogate_is_escaped():
    out = dump_forest([FileNode(name="bad\ud800.txt", full_path="bad\ud800.txt")])

    assert out == '[{"name":"bad\\ud800.txt","fullPath":"bad\\ud800.txt"}]'
    out.encode("utf-8")
    assert dump_data(json.loads(out)) == out
