from typing import Protocol, runtime_checkable
from dataclasses import dataclass, field
from vintagepy.domain.types import ImageBuffer, Dimensions


@dataclass
class PipelineContext:
    """
    Per-invocation state passed through the stage fold.
    """

    original_size: Dimensions

    style: str = ""

    tier: str = ""

    # Names of stages that fell back to their input
    skipped_stages: list[str] = field(default_factory=list)


@runtime_checkable
class IProcessor(Protocol):
    """
    Interface for any image processing step.
    """

    def process(self, image: ImageBuffer, context: PipelineContext) -> ImageBuffer: ...


class IImageCodec(Protocol):
    """
    Interface for the decode/encode boundary.
    """

    def decode(self, data: bytes) -> ImageBuffer: ...

    def encode(self, image: ImageBuffer, quality: float) -> bytes: ...
