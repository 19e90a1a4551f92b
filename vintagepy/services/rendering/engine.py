from typing import Optional
from vintagepy.domain.errors import CoreImageFilterFailed
from vintagepy.domain.interfaces import PipelineContext
from vintagepy.domain.models import FilterStyle, Tier
from vintagepy.domain.types import ImageBuffer
from vintagepy.infrastructure.codec import PillowCodec
from vintagepy.kernel.image.validation import ensure_image
from vintagepy.kernel.system.config import APP_CONFIG, AppConfig
from vintagepy.kernel.system.logging import get_logger
from vintagepy.services.rendering.context import RenderContext
from vintagepy.services.rendering.recipes import get_pipeline
from vintagepy.services.rendering.stages import Pipeline, Stage

logger = get_logger(__name__)


class VintageEngine:
    """
    Decodes input bytes, folds the style pipeline over the image and encodes
    the result. Holds no per-call state, so one engine can serve concurrent
    invocations.
    """

    def __init__(
        self,
        render_context: Optional[RenderContext] = None,
        codec: Optional[PillowCodec] = None,
        config: AppConfig = APP_CONFIG,
    ) -> None:
        self.render_context = render_context or RenderContext()
        self.codec = codec or PillowCodec()
        self.config = config

    def quality_for(self, tier: Tier) -> float:
        if tier == Tier.LIGHTWEIGHT:
            return self.config.lightweight_jpeg_quality
        return self.config.full_jpeg_quality

    def _ensure_backend(self) -> None:
        if not self.render_context.is_available:
            raise CoreImageFilterFailed("no image operators available")

    def fold(
        self, image: ImageBuffer, pipeline: Pipeline, context: PipelineContext
    ) -> ImageBuffer:
        """
        Applies stages strictly in order; each stage sees only its predecessor's output.
        """
        current = image
        for spec in pipeline:
            current = Stage(spec, self.render_context).process(current, context)
        return current

    def apply(
        self,
        image: ImageBuffer,
        style: FilterStyle,
        tier: Tier = Tier.FULL,
        context: Optional[PipelineContext] = None,
    ) -> ImageBuffer:
        """
        Runs the style pipeline on an already decoded image.
        """
        self._ensure_backend()
        img = ensure_image(image)
        if context is None:
            context = PipelineContext(
                original_size=(img.shape[0], img.shape[1]),
                style=style.display_name,
                tier=tier.value,
            )
        return self.fold(img, get_pipeline(style, tier), context)

    def run(self, style: FilterStyle, data: bytes, tier: Tier = Tier.FULL) -> bytes:
        """
        Encoded bytes in, encoded JPEG bytes out. Raises a FilterError subclass
        on decode, materialize or encode failure.
        """
        self._ensure_backend()
        img = self.codec.decode(data)

        context = PipelineContext(
            original_size=(img.shape[0], img.shape[1]),
            style=style.display_name,
            tier=tier.value,
        )
        processed = self.apply(img, style, tier, context)
        if context.skipped_stages:
            logger.info(
                f"{style.display_name} ({tier.value}) ran without: "
                f"{', '.join(context.skipped_stages)}"
            )

        return self.codec.encode(processed, self.quality_for(tier))

    def resave(self, data: bytes) -> bytes:
        """
        Re-encodes an unfiltered image for persistence.
        """
        img = self.codec.decode(data)
        return self.codec.encode(img, self.config.resave_jpeg_quality)
