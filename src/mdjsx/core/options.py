"""Immutable compiler configuration shared by every compile"""

from collections.abc import Callable
from typing import Any

import pydantic
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from mdjsx.core.resolve import DEFAULT_RESOLVERS
from mdjsx.core.stages import no_override
from mdjsx.errors import ValidationError


ROOT_TEMPLATE = """\
export default function() {{
  return (
    <React.Fragment>
      <Layout>
      {body}
      </Layout>
    </React.Fragment>
  );
}}"""


def layout_root(body: str) -> str:
    """Wrap body in the site Layout component."""
    return ROOT_TEMPLATE.format(body=body)


class CompilerConfig(BaseModel):
    """Resolver chain, transform stages and stringify hooks for the compiler.

    Accepts both snake_case and camelCase option names; unknown options are
    rejected. Instances are frozen and safe to share across concurrent compiles.
    """
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    import_resolvers:    tuple[Callable, ...] = Field(default=DEFAULT_RESOLVERS)
    pre_parse_stages:    tuple[Callable, ...] = ()
    parser_plugins:      tuple[Callable, ...] = ()
    post_parse_stages:   tuple[Callable, ...] = ()
    post_bridge_stages:  tuple[Callable, ...] = ()
    post_compile_stages: tuple[Callable, ...] = ()
    stringify_override:  Callable = no_override
    stringify_root:      Callable = layout_root


def build_config(**options: Any) -> CompilerConfig:
    """Validate options into a CompilerConfig, raising ValidationError on bad input."""
    try:
        return CompilerConfig(**options)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid compiler configuration: {e}") from e
