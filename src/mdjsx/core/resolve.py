"""Import resolvers: map a referenced component name to an import descriptor"""

from collections.abc import Callable, Iterable, Sequence
from typing import Optional

from mdjsx.core.models import ImportDescriptor


Resolver = Callable[[str], Optional[ImportDescriptor]]

RUNTIME_BASE = "React"
RUNTIME_MODULE = "react"
COMPONENTS_DIR = "../components"


def runtime_resolver(name: str) -> Optional[ImportDescriptor]:
    """Default import of the UI runtime for the reserved runtime-base name."""
    if name == RUNTIME_BASE:
        return ImportDescriptor(RUNTIME_BASE, RUNTIME_MODULE)
    return None


def make_filesystem_resolver(components_dir: str = COMPONENTS_DIR) -> Resolver:
    """Resolver treating every name as a locally authored component under components_dir."""
    base = components_dir.rstrip("/")

    def _resolve(name: str) -> Optional[ImportDescriptor]:
        return ImportDescriptor(name, f"{base}/{name}")

    _resolve.__name__ = "filesystem_resolver"
    return _resolve


filesystem_resolver = make_filesystem_resolver()


def module_resolver(module: str, names: Iterable[str], default: bool = False) -> Resolver:
    """Resolver importing each of names from module (named imports unless default)."""
    known = frozenset(names)

    def _resolve(name: str) -> Optional[ImportDescriptor]:
        if name in known:
            return ImportDescriptor(name, module, default)
        return None

    _resolve.__name__ = f"module_resolver[{module}]"
    return _resolve


link_resolver = module_resolver("gatsby", ["Link"])
katex_resolver = module_resolver("react-katex", ["InlineMath", "BlockMath"])

DEFAULT_RESOLVERS: tuple[Resolver, ...] = (runtime_resolver, filesystem_resolver)


def resolve(name: str, resolvers: Sequence[Resolver]) -> Optional[ImportDescriptor]:
    """Return the first descriptor any resolver produces for name, in order."""
    for resolver in resolvers:
        descriptor = resolver(name)
        if descriptor is not None:
            return descriptor
    return None
