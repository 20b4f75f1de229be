"""Event types emitted while generating CSS for a block tree."""

from dataclasses import dataclass

from patterncss.model.context import RenderMode


@dataclass(frozen=True)
class GenerationStarted:
    mode: RenderMode
    base_selector: str


@dataclass(frozen=True)
class BlockStyled:
    block_name: str
    generator: str
    css_length: int


@dataclass(frozen=True)
class BlockSkipped:
    block_name: str
    reason: str  # "unnamed" or "unclaimed"


@dataclass(frozen=True)
class GeneratorFailed:
    block_name: str
    generator: str
    error: str


@dataclass(frozen=True)
class GenerationCompleted:
    blocks: int
    css_length: int
