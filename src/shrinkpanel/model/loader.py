"""Load layout trees from JSON documents.

A document is a nested mapping::

    {
        "type": "panel",
        "name": "window",
        "orientation": "vertical",
        "shrink_index": 1,
        "children": [
            {"name": "toolbar", "width": 320, "height": 40},
            {"name": "list", "width": 320, "height": 900},
            {"name": "status", "width": 320, "height": 24}
        ]
    }

Nodes with ``children`` default to panels, all others to boxes.
"""

import itertools
import json
import logging
import math
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from shrinkpanel.errors import LoadError, ValidationError, validate_non_negative, validate_range
from shrinkpanel.layout.axis import Orientation
from shrinkpanel.model.element import Box, Element, ShrinkingPanel

logger = logging.getLogger(__name__)

NODE_TYPES = ("box", "panel")


def load_tree(path: Path | str) -> Element:
    """Load a layout tree from a JSON file.

    Args:
        path: Path of the document

    Returns:
        Root element of the tree

    Raises:
        LoadError: If the file cannot be read, is not UTF-8 or is not valid JSON
        ValidationError: If the document describes an invalid tree
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise LoadError(path, e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        raise LoadError(path, f"invalid JSON at line {e.lineno}: {e.msg}") from e
    except UnicodeDecodeError as e:
        raise LoadError(path, f"not UTF-8: {e.reason}") from e

    root = parse_tree(data)
    logger.debug(f"Loaded layout tree '{root.name}' from {path}")
    return root


def parse_tree(data: Any) -> Element:
    """Build a layout tree from an already decoded document.

    Args:
        data: Root node mapping

    Returns:
        Root element of the tree

    Raises:
        ValidationError: If the document describes an invalid tree
    """
    counter = itertools.count()
    return _parse_node(data, "root", counter)


def _parse_node(data: Any, where: str, counter: Iterator[int]) -> Element:
    if not isinstance(data, dict):
        raise ValidationError(where, data, "object")

    index = next(counter)
    node_type = data.get("type", "panel" if "children" in data else "box")
    if node_type not in NODE_TYPES:
        raise ValidationError(f"{where}.type", node_type, " or ".join(repr(t) for t in NODE_TYPES))

    name = data.get("name", f"{node_type}{index}")
    if not isinstance(name, str):
        raise ValidationError(f"{where}.name", name, "string")

    if node_type == "box":
        if "children" in data:
            raise ValidationError(f"{where}.children", data["children"], "no children on a box")
        return Box(
            name,
            width=validate_non_negative(data.get("width", 0.0), f"{where}.width"),
            height=validate_non_negative(data.get("height", 0.0), f"{where}.height"),
        )

    try:
        orientation = Orientation.parse(data.get("orientation", Orientation.VERTICAL.value))
    except ValueError:
        raise ValidationError(
            f"{where}.orientation", data.get("orientation"), "'horizontal' or 'vertical'"
        ) from None

    shrink_index = data.get("shrink_index", 0)
    if isinstance(shrink_index, bool) or not isinstance(shrink_index, int):
        raise ValidationError(f"{where}.shrink_index", shrink_index, "integer")
    validate_range(shrink_index, 0, math.inf, f"{where}.shrink_index")

    children = data.get("children", [])
    if not isinstance(children, list):
        raise ValidationError(f"{where}.children", children, "list")

    panel = ShrinkingPanel(name, orientation=orientation, shrink_index=shrink_index)
    for i, child in enumerate(children):
        panel.add_child(_parse_node(child, f"{where}.children[{i}]", counter))
    return panel
