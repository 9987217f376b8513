"""Model layer for shrinkpanel.

This module contains the element tree that hosts the layout engine
and the loader for reading trees from JSON documents.
"""

from shrinkpanel.model.element import Box, Element, ShrinkingPanel, layout_tree
from shrinkpanel.model.loader import load_tree, parse_tree

__all__ = ["Box", "Element", "ShrinkingPanel", "layout_tree", "load_tree", "parse_tree"]
