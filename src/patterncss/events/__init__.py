from patterncss.events.bus import EventBus
from patterncss.events.types import (
    BlockSkipped,
    BlockStyled,
    GenerationCompleted,
    GenerationStarted,
    GeneratorFailed,
)

__all__ = [
    "EventBus",
    "GenerationStarted",
    "GenerationCompleted",
    "BlockStyled",
    "BlockSkipped",
    "GeneratorFailed",
]
