"""
CSS generator for widget themes.

Turns a widget's selector map into a starter stylesheet: one empty rule per
themeable class, ready for the theme author to fill in.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from .constants import METADATA_KEY_PREFIX

SelectorCompiler = Callable[[Mapping[str, str]], str]


def convert_selectors_to_css(selector_map: Mapping[str, str]) -> str:
    """
    Generate CSS from a widget selector map.

    Args:
        selector_map: Selector name -> generated class name, in declaration order

    Returns:
        CSS text with one ``.name {}`` block per selector, blank-line separated
    """
    blocks = [
        f".{name} {{\n}}\n"
        for name in selector_map
        if not name.startswith(METADATA_KEY_PREFIX)
    ]
    return "\n".join(blocks)
