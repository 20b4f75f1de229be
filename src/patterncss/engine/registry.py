"""GeneratorRegistry: ordered, first-match dispatch from block name to generator."""

from __future__ import annotations

import logging

from patterncss.errors import RegistryFrozenError
from patterncss.generators.base import Generator

logger = logging.getLogger(__name__)


class GeneratorRegistry:
    """Holds generators in registration order.

    Generators may be appended until the first :meth:`resolve`; after that
    the list is fixed for the registry's lifetime.
    """

    def __init__(self, generators: list[Generator] | None = None) -> None:
        self._generators: list[Generator] = list(generators or ())
        self._frozen = False

    def register(self, generator: Generator) -> None:
        """Append a generator; it is checked after all earlier ones."""
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register {getattr(generator, 'name', generator)!r}: "
                "registry has already resolved blocks"
            )
        self._generators.append(generator)

    @property
    def generators(self) -> tuple[Generator, ...]:
        return tuple(self._generators)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def resolve(self, block_name: str) -> Generator | None:
        """Return the first generator that claims *block_name*, or None."""
        self._frozen = True
        for generator in self._generators:
            if generator.can_handle(block_name):
                return generator
        logger.debug("No generator claims block %r", block_name)
        return None

    def __len__(self) -> int:
        return len(self._generators)
