"""Syntax-tree to markup-tree conversion"""

from markdown_it.tree import SyntaxTreeNode

from mdjsx.core.models import Element, Node, Raw, Root, Text


INLINE_MATH_CLASS = "inlineMath"
BLOCK_MATH_CLASS = "math"
METADATA_CLASS = "metadata"

# markdown-it node type -> markup tag, for nodes whose children convert directly
CONTAINER_TAGS: dict[str, str] = {
    'blockquote':    'blockquote',
    'bullet_list':   'ul',
    'ordered_list':  'ol',
    'list_item':     'li',
    'em':            'em',
    'strong':        'strong',
    's':             'del',
    'table':         'table',
    'thead':         'thead',
    'tbody':         'tbody',
    'tr':            'tr',
}


def _attrs(node: SyntaxTreeNode) -> dict:
    return {k: str(v) for k, v in node.attrs.items()}


def _cell_attrs(node: SyntaxTreeNode) -> dict:
    """Table cell attributes with text-align styles turned into align."""
    attrs = _attrs(node)
    style = attrs.pop("style", "")
    if style.startswith("text-align:"):
        attrs["align"] = style.split(":", 1)[1].strip()
    return attrs


def _children(node: SyntaxTreeNode) -> list[Node]:
    out: list[Node] = []
    for child in node.children:
        out.extend(convert(child))
    return out


def _code_block(node: SyntaxTreeNode) -> Element:
    code_attrs = {}
    lang = node.info.strip().split(maxsplit=1)[0] if node.info.strip() else ""
    if lang:
        code_attrs["className"] = f"language-{lang}"
    return Element("pre", {}, [Element("code", code_attrs, [Text(node.content)])])


def convert(node: SyntaxTreeNode) -> list[Node]:
    """Convert one syntax-tree node into zero or more markup nodes."""
    t = node.type

    if t == 'text':
        return [Text(node.content)]
    if t == 'inline':
        return _children(node)
    if t == 'softbreak':
        return [Text("\n")]
    if t == 'hardbreak':
        return [Element("br")]
    if t in ('html_block', 'html_inline'):
        return [Raw(node.content)]
    if t == 'paragraph':
        # tight list items hide their paragraph wrapper
        return _children(node) if node.hidden else [Element("p", {}, _children(node))]
    if t == 'heading':
        return [Element(node.tag, {}, _children(node))]
    if t in ('fence', 'code_block'):
        return [_code_block(node)]
    if t == 'code_inline':
        return [Element("code", {}, [Text(node.content)])]
    if t == 'hr':
        return [Element("hr")]
    if t == 'link':
        return [Element("a", _attrs(node), _children(node))]
    if t == 'image':
        attrs = {"src": str(node.attrs.get("src", "")), "alt": node.content}
        if "title" in node.attrs:
            attrs["title"] = str(node.attrs["title"])
        return [Element("img", attrs)]
    if t == 'math_inline':
        return [Element("span", {"className": INLINE_MATH_CLASS}, [Text(node.content)])]
    if t in ('math_block', 'math_block_label', 'math_inline_double'):
        return [Element("div", {"className": BLOCK_MATH_CLASS}, [Text(node.content)])]
    if t == 'front_matter':
        return [Element("pre", {"className": METADATA_CLASS}, [Text(node.content)])]
    if t in ('th', 'td'):
        return [Element(t, _cell_attrs(node), _children(node))]
    if t in CONTAINER_TAGS:
        return [Element(CONTAINER_TAGS[t], _attrs(node), _children(node))]

    # unknown plugin output: keep its tag when it has one, else its text
    if node.tag:
        return [Element(node.tag, _attrs(node), _children(node))]
    return [Text(node.content)] if node.content else _children(node)


def to_markup(tree: SyntaxTreeNode) -> Root:
    """Convert a markdown-it syntax tree into a markup Root."""
    return Root(_children(tree))
