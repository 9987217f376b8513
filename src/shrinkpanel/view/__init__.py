"""View layer for shrinkpanel.

This module provides the Qt integration of the layout engine:

- ShrinkingLayout: QLayout stacking items with one shrinking item

Requires PyQt6 (``pip install shrinkpanel[qt]``).
"""

from shrinkpanel.view.qt_layout import ShrinkingLayout

__all__ = ["ShrinkingLayout"]
