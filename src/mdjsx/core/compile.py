"""Markup tree to component source compilation"""

import re
from typing import Optional

from mdjsx.core.models import CompilerOutput, Element, Node, Raw, Rendered, Root, Text
from mdjsx.core.options import CompilerConfig
from mdjsx.core.resolve import RUNTIME_BASE, resolve
from mdjsx.errors import ResolutionError


# Uppercase-led opening tag; lowercase tags are plain markup.
# Matches inside attribute values or comments too, so it can over-report.
COMPONENT_NAME_RE = re.compile(r'<([A-Z][a-zA-Z_]+)')


def component_names(markup: str) -> tuple[str, ...]:
    """Return component names referenced by opening tags in markup, in order."""
    return tuple(COMPONENT_NAME_RE.findall(markup))


def _attributes(attributes: dict) -> str:
    return " ".join(f'{name}="{value}"' for name, value in attributes.items())


def _join(rendered: list[Rendered]) -> Rendered:
    return Rendered(
        "".join(r.jsx for r in rendered),
        tuple(name for r in rendered for name in r.imports),
    )


def stringify(node: Node, config: CompilerConfig) -> Rendered:
    """Render node and collect the component names it references."""
    result = config.stringify_override(node)
    if result is not None:
        return result

    if isinstance(node, Text):
        return Rendered(node.value)
    if isinstance(node, Raw):
        return Rendered(node.value, component_names(node.value))
    if isinstance(node, Element):
        inner = _join([stringify(c, config) for c in node.children])
        attrs = _attributes(node.attributes)
        opening = f"{node.tag} {attrs}" if attrs else node.tag
        return Rendered(f"<{opening}>{inner.jsx}</{node.tag}>", inner.imports)
    if isinstance(node, Root):
        return _join([stringify(c, config) for c in node.children])
    raise TypeError(f"Cannot stringify {type(node).__name__}")


def compile_tree(root: Root, config: CompilerConfig, source_path: Optional[str] = None) -> CompilerOutput:
    """Compile a markup tree into import statements plus a component definition.

    Required names are the runtime base, names used by the root template,
    then body references in first-use order. The first name no resolver
    accepts raises ResolutionError.
    """
    body = stringify(root, config)
    template_names = component_names(config.stringify_root(""))
    names = list(dict.fromkeys((RUNTIME_BASE, *template_names, *body.imports)))

    statements = []
    for name in names:
        descriptor = resolve(name, config.import_resolvers)
        if descriptor is None:
            raise ResolutionError(name, source_path)
        statements.append(descriptor.statement())

    return CompilerOutput(imports=tuple(statements), component=config.stringify_root(body.jsx))
