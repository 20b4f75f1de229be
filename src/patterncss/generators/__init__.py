"""CSS generator families for block namespaces."""

from __future__ import annotations

from typing import TYPE_CHECKING

from patterncss.config import DEFAULT_CONFIG, PatternCSSConfig
from patterncss.generators.base import Generator
from patterncss.generators.core import CoreBlockGenerator
from patterncss.generators.spectra import SpectraBlockGenerator

if TYPE_CHECKING:
    from patterncss.engine.registry import GeneratorRegistry

__all__ = [
    "Generator",
    "CoreBlockGenerator",
    "SpectraBlockGenerator",
    "create_default_registry",
]


def create_default_registry(
    config: PatternCSSConfig = DEFAULT_CONFIG,
    *,
    extra_generators: list[Generator] | None = None,
) -> GeneratorRegistry:
    """Create a GeneratorRegistry with the built-in families registered.

    Args:
        config: Settings passed to generators that need them.
        extra_generators: Additional generators, checked after the built-ins.

    Returns:
        A registry that has not been resolved against yet, so callers may
        still append generators.
    """
    from patterncss.engine.registry import GeneratorRegistry

    registry = GeneratorRegistry()

    # core/* first: precedence follows registration order
    registry.register(CoreBlockGenerator(config))
    registry.register(SpectraBlockGenerator())

    for generator in extra_generators or ():
        registry.register(generator)

    return registry
