"""Unit tests for core/bridge.py"""

from mdjsx.core.bridge import to_markup
from mdjsx.core.models import Element, Raw, Root, Text
from mdjsx.core.parse import parse_document
from mdjsx.core.stages import math_plugin, strip_metadata


def _markup(md: str, plugins=()) -> Root:
    return to_markup(parse_document(md, plugins))


def test_heading_and_paragraph():
    """Headings keep their level tag; paragraphs become p elements."""
    root = _markup("## Hello\n\nWorld\n")
    assert root.children == [
        Element("h2", {}, [Text("Hello")]),
        Element("p", {}, [Text("World")]),
    ]


def test_inline_formatting():
    """Emphasis, strong, code and links map to their markup tags."""
    root = _markup("*a* **b** `c` [d](/e)\n")
    p = root.children[0]
    tags = [c.tag for c in p.children if isinstance(c, Element)]
    assert tags == ["em", "strong", "code", "a"]
    link = p.children[-1]
    assert link.attributes == {"href": "/e"}
    assert link.children == [Text("d")]


def test_tight_list_hides_paragraphs():
    """Tight list items contain their text directly."""
    root = _markup("- a\n- b\n")
    assert root.children == [
        Element("ul", {}, [Element("li", {}, [Text("a")]), Element("li", {}, [Text("b")])]),
    ]


def test_ordered_list_start():
    """An ordered list starting above 1 keeps its start attribute."""
    root = _markup("3. three\n4. four\n")
    assert root.children[0].tag == "ol"
    assert root.children[0].attributes == {"start": "3"}


def test_fence_language_class():
    """Fenced code becomes pre > code with a language class."""
    root = _markup("```python\nprint(1)\n```\n")
    assert root.children == [
        Element("pre", {}, [Element("code", {"className": "language-python"}, [Text("print(1)\n")])]),
    ]


def test_raw_block_and_inline():
    """Block and inline markup pass through as Raw nodes."""
    root = _markup('<Desmos calculatorId="abc" />\n\nSee <Link to="/x">here</Link>.\n')
    assert root.children[0] == Raw('<Desmos calculatorId="abc" />\n')
    p = root.children[1]
    assert Raw('<Link to="/x">') in p.children
    assert Raw('</Link>') in p.children


def test_image_attributes():
    """Images carry src and alt in order."""
    root = _markup("![a cat](cat.png)\n")
    img = root.children[0].children[0]
    assert img == Element("img", {"src": "cat.png", "alt": "a cat"})


def test_table():
    """Tables convert row by row."""
    root = _markup("| a | b |\n|---|---|\n| 1 | 2 |\n")
    table = root.children[0]
    assert table.tag == "table"
    assert [c.tag for c in table.children] == ["thead", "tbody"]


def test_math_marked_with_class():
    """Inline and block math become elements with reserved class markers."""
    root = _markup("Inline $x^2$ here.\n\n$$\ny = mx\n$$\n", plugins=[math_plugin])
    inline = root.children[0].children[1]
    assert inline == Element("span", {"className": "inlineMath"}, [Text("x^2")])
    block = root.children[1]
    assert block.tag == "div"
    assert block.attributes == {"className": "math"}
    assert "y = mx" in block.children[0].value


def test_metadata_block_kept_without_strip_stage():
    """Without the strip stage the metadata block is bridged as a marked pre."""
    root = _markup("---\ntitle: T\n---\n# Body\n")
    first = root.children[0]
    assert first.tag == "pre"
    assert first.attributes == {"className": "metadata"}


def test_strip_metadata_stage():
    """strip_metadata removes the metadata block node only."""
    tree = strip_metadata(parse_document("---\ntitle: T\n---\n# Body\n"))
    root = to_markup(tree)
    assert root.children == [Element("h1", {}, [Text("Body")])]


def test_softbreak_becomes_newline():
    """Line breaks inside a paragraph are kept as newline text."""
    root = _markup("one\ntwo\n")
    assert root.children[0].children == [Text("one"), Text("\n"), Text("two")]


def test_table_alignment_becomes_align_attribute():
    """Aligned columns render as align attributes, never as a style string."""
    root = _markup("| a | b |\n|--:|:--|\n| 1 | 2 |\n")
    thead, tbody = root.children[0].children
    assert thead.children[0].children == [
        Element("th", {"align": "right"}, [Text("a")]),
        Element("th", {"align": "left"}, [Text("b")]),
    ]
    assert tbody.children[0].children[1] == Element("td", {"align": "left"}, [Text("2")])


def test_table_unaligned_cells_have_no_attributes():
    """Cells without an alignment marker carry no attributes."""
    root = _markup("| a |\n|---|\n| 1 |\n")
    assert root.children[0].children[0].children[0].children[0] == Element("th", {}, [Text("a")])
