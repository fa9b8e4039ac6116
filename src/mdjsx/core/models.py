"""Markup tree nodes and the data models passed between pipeline stages"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

from pydantic import BaseModel, Field


@dataclass
class Text:
    """Literal text; rendered as-is."""
    value: str


@dataclass
class Raw:
    """Passthrough markup (inline or block HTML / JSX) copied verbatim."""
    value: str


@dataclass
class Element:
    """A markup element; attributes keep insertion order."""
    tag: str
    attributes: dict[str, Any] = field(default_factory=dict)
    children: list["Node"] = field(default_factory=list)


@dataclass
class Root:
    """Top of the markup tree, one per document."""
    children: list["Node"] = field(default_factory=list)


Node = Union[Root, Element, Text, Raw]


@dataclass(frozen=True)
class Rendered:
    """Stringified node: its JSX text plus the component names it needs imported."""
    jsx: str
    imports: tuple[str, ...] = ()


@dataclass(frozen=True)
class ImportDescriptor:
    """How a component name is imported: default or named export of a module."""
    name: str
    module: str
    default: bool = True

    def statement(self) -> str:
        binding = self.name if self.default else f"{{{self.name}}}"
        return f'import {binding} from "{self.module}";'


@dataclass(frozen=True)
class CompilerOutput:
    """Resolved import statements followed by the component definition."""
    imports: tuple[str, ...]
    component: str

    @property
    def text(self) -> str:
        return "\n".join(self.imports) + "\n\n" + self.component


class DocumentSource(BaseModel):
    """A discovered document as handed over by filesystem discovery."""
    absolute_path: Path
    relative_directory: str = ""    # posix, "" for documents at the content root
    name: str                       # file stem


class PageContext(BaseModel):
    metadata: dict[str, Any] = Field(default_factory=dict)


class Page(BaseModel):
    """Page descriptor for page registration: route path, source component, context."""
    path: str
    component: Path
    context: PageContext = Field(default_factory=PageContext)


@dataclass
class CompiledPage:
    """Successful compile of one document."""
    source: DocumentSource
    page: Page
    output: str
