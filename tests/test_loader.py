"""Unit tests for loading layout trees from JSON."""

import json
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from shrinkpanel.errors import LoadError, ValidationError
from shrinkpanel.layout.axis import Orientation
from shrinkpanel.model.element import Box, ShrinkingPanel
from shrinkpanel.model.loader import load_tree, parse_tree

DOCUMENT = {
    "type": "panel",
    "name": "window",
    "orientation": "vertical",
    "shrink_index": 1,
    "children": [
        {"name": "toolbar", "width": 320, "height": 40},
        {
            "name": "body",
            "orientation": "horizontal",
            "children": [
                {"name": "list", "width": 200, "height": 900},
                {"width": 120, "height": 300},
            ],
        },
        {"name": "status", "width": 320, "height": 24},
    ],
}


def test_parse_tree():
    """Test building a tree from a decoded document."""
    root = parse_tree(DOCUMENT)

    assert isinstance(root, ShrinkingPanel)
    assert root.name == "window"
    assert root.shrink_index == 1
    assert [child.name for child in root.children] == ["toolbar", "body", "status"]

    body = root.find("body")
    assert isinstance(body, ShrinkingPanel)
    assert body.orientation is Orientation.HORIZONTAL
    assert body.shrink_index == 0
    assert body.parent is root

    toolbar = root.find("toolbar")
    assert isinstance(toolbar, Box)
    assert (toolbar.width, toolbar.height) == (320.0, 40.0)


def test_default_names():
    """Test that unnamed nodes are named after their type and position."""
    root = parse_tree(DOCUMENT)

    # window=0, toolbar=1, body=2, list=3, unnamed=4
    assert root.find("box4") is not None


def test_load_tree(tmp_path):
    """Test loading a tree from a file."""
    path = tmp_path / "tree.json"
    path.write_text(json.dumps(DOCUMENT), encoding="utf-8")

    root = load_tree(path)

    assert root.name == "window"
    assert len(list(root.walk())) == 6


def test_load_missing_file(tmp_path):
    """Test that a missing file raises LoadError."""
    with pytest.raises(LoadError) as excinfo:
        load_tree(tmp_path / "missing.json")

    assert "missing.json" in str(excinfo.value)


def test_load_invalid_json(tmp_path):
    """Test that malformed JSON raises LoadError."""
    path = tmp_path / "broken.json"
    path.write_text('{"name": ', encoding="utf-8")

    with pytest.raises(LoadError) as excinfo:
        load_tree(path)

    assert "invalid JSON" in excinfo.value.reason


def test_load_invalid_utf8(tmp_path):
    """Test that a file that is not UTF-8 raises LoadError."""
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"name": "\xff\xfe"}')

    with pytest.raises(LoadError) as excinfo:
        load_tree(path)

    assert "not UTF-8" in excinfo.value.reason


@pytest.mark.parametrize(
    "document, field",
    [
        ([], "root"),
        ({"type": "grid"}, "root.type"),
        ({"name": 3}, "root.name"),
        ({"width": -1}, "root.width"),
        ({"height": "tall"}, "root.height"),
        ({"type": "box", "children": []}, "root.children"),
        ({"children": [], "orientation": "diagonal"}, "root.orientation"),
        ({"children": [], "shrink_index": -1}, "root.shrink_index"),
        ({"children": [], "shrink_index": 1.5}, "root.shrink_index"),
        ({"children": [], "shrink_index": True}, "root.shrink_index"),
        ({"children": {}}, "root.children"),
        ({"children": [{"width": -2}]}, "root.children[0].width"),
        ({"width": 1e400}, "root.width"),
        ({"width": 10**400}, "root.width"),
        ({"children": [{"width": 10, "height": float("inf")}]}, "root.children[0].height"),
    ],
)
def test_validation_errors(document, field):
    """Test that invalid documents name the offending field."""
    with pytest.raises(ValidationError) as excinfo:
        parse_tree(document)

    assert excinfo.value.field == field


def test_large_shrink_index_allowed():
    """Test that shrink indices past the last child are accepted."""
    root = parse_tree({"children": [{"width": 1, "height": 1}], "shrink_index": 10})

    assert root.shrink_index == 10
