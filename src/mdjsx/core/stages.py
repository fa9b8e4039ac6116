"""Built-in tree stages and stringify overrides"""

import re
from collections.abc import Callable
from typing import Optional

from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.dollarmath import dollarmath_plugin

from mdjsx.core.bridge import BLOCK_MATH_CLASS, INLINE_MATH_CLASS
from mdjsx.core.models import Element, Node, Rendered, Text


StringifyOverride = Callable[[Node], Optional[Rendered]]

math_plugin = dollarmath_plugin

_TEMPLATE_SPECIAL_RE = re.compile(r"`|\$\{")
_TEMPLATE_ESCAPES = {"`": '${"`"}', "${": '${"$"}{'}


def strip_metadata(tree: SyntaxTreeNode) -> SyntaxTreeNode:
    """Drop the leading metadata block node from the syntax tree."""
    tree.children = [c for c in tree.children if c.type != 'front_matter']
    return tree


def no_override(node: Node) -> Optional[Rendered]:
    return None


def _math_source(node: Element) -> str:
    return "".join(c.value for c in node.children if isinstance(c, Text))


def _raw_string(source: str) -> str:
    """Wrap source in a JSX String.raw template expression.

    Backticks and '${' are spliced in as string expressions so the raw
    value stays identical to source.
    """
    escaped = _TEMPLATE_SPECIAL_RE.sub(lambda m: _TEMPLATE_ESCAPES[m.group()], source)
    return f"{{String.raw`{escaped}`}}"


def math_override(node: Node) -> Optional[Rendered]:
    """Render marked math spans as InlineMath / BlockMath invocations."""
    if not isinstance(node, Element):
        return None
    marker = node.attributes.get("className")
    if node.tag == "span" and marker == INLINE_MATH_CLASS:
        return Rendered(f"<InlineMath>{_raw_string(_math_source(node))}</InlineMath>", ("InlineMath",))
    if node.tag == "div" and marker == BLOCK_MATH_CLASS:
        return Rendered(f"<BlockMath>{_raw_string(_math_source(node))}</BlockMath>", ("BlockMath",))
    return None


def chain_overrides(*overrides: StringifyOverride) -> StringifyOverride:
    """Compose overrides; the first to return a result wins."""
    def override(node: Node) -> Optional[Rendered]:
        for fn in overrides:
            result = fn(node)
            if result is not None:
                return result
        return None
    return override
