import io
import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError
from vintagepy.domain.errors import (
    CGImageCreationFailed,
    DataConversionFailed,
    InvalidInputData,
)
from vintagepy.domain.interfaces import IImageCodec
from vintagepy.domain.types import ImageBuffer
from vintagepy.kernel.image.logic import float_to_uint8, uint8_to_float32
from vintagepy.kernel.image.validation import ensure_rgb
from vintagepy.kernel.system.config import APP_CONFIG
from vintagepy.kernel.system.logging import get_logger

logger = get_logger(__name__)


def _pil_quality(quality: float) -> int:
    """
    Maps a 0..1 compression quality onto Pillow's 1..95 JPEG scale.
    """
    return int(np.clip(round(quality * 100), 1, 95))


def open_image(data: bytes) -> Image.Image:
    """
    Bytes -> fully loaded 8-bit RGB PIL image with EXIF orientation applied.
    """
    if not data:
        raise InvalidInputData("empty input")
    try:
        img = Image.open(io.BytesIO(data))
        img.load()
        img = _to_rgb(ImageOps.exif_transpose(img))
    except (
        Image.DecompressionBombError,
        UnidentifiedImageError,
        OSError,
        EOFError,
        ValueError,
        SyntaxError,
    ) as e:
        raise InvalidInputData(str(e)) from e
    if img.width == 0 or img.height == 0:
        raise InvalidInputData("zero-sized image")
    return img


def _to_8bit(img: Image.Image) -> Image.Image:
    """
    16-bit integer grayscale -> 8-bit "L", keeping the high byte.
    """
    arr = np.asarray(img).astype(np.int64)
    return Image.fromarray((np.clip(arr, 0, 65535) >> 8).astype(np.uint8))


def _to_rgb(img: Image.Image) -> Image.Image:
    if img.mode == "RGB":
        return img
    if img.mode == "I" or img.mode.startswith("I;16"):
        return _to_8bit(img).convert("RGB")
    if img.mode in ("RGBA", "LA") or (img.mode == "P" and "transparency" in img.info):
        # Alpha is dropped; transparent regions keep their stored color
        return img.convert("RGBA").convert("RGB")
    return img.convert("RGB")


class PillowCodec(IImageCodec):
    """
    Decodes common raster formats, encodes baseline JPEG.
    """

    def decode(self, data: bytes) -> ImageBuffer:
        img = open_image(data)
        arr = ensure_rgb(np.asarray(img, dtype=np.uint8))
        logger.debug(f"Decoded {img.width}x{img.height} image")
        return uint8_to_float32(np.ascontiguousarray(arr))

    def materialize(self, image: ImageBuffer) -> np.ndarray:
        """
        Final float buffer -> uint8 RGB raster.
        """
        if not isinstance(image, np.ndarray) or image.ndim != 3 or image.shape[2] != 3:
            shape = getattr(image, "shape", None)
            raise CGImageCreationFailed(f"unexpected buffer shape {shape}")
        if image.shape[0] == 0 or image.shape[1] == 0:
            raise CGImageCreationFailed("empty buffer")
        if not np.all(np.isfinite(image)):
            raise CGImageCreationFailed("non-finite pixel values")
        return float_to_uint8(image)

    def encode(self, image: ImageBuffer, quality: float) -> bytes:
        raster = self.materialize(image)
        return self.encode_raster(raster, quality)

    def encode_raster(self, raster: np.ndarray, quality: float) -> bytes:
        try:
            pil_img = Image.fromarray(raster)
            output_buf = io.BytesIO()
            pil_img.save(output_buf, format="JPEG", quality=_pil_quality(quality))
        except (OSError, ValueError, TypeError) as e:
            raise DataConversionFailed(str(e)) from e
        data = output_buf.getvalue()
        if not data:
            raise DataConversionFailed("encoder produced no bytes")
        return data


def optimized_jpeg(
    data: bytes,
    max_dimension: int = APP_CONFIG.optimized_max_dimension,
    quality: float = APP_CONFIG.optimized_jpeg_quality,
) -> bytes:
    """
    Downscales to fit max_dimension (aspect preserved) and re-encodes for
    storage or transmission.
    """
    img = open_image(data)
    img.thumbnail((max_dimension, max_dimension), Image.Resampling.LANCZOS)
    return PillowCodec().encode_raster(np.asarray(img, dtype=np.uint8), quality)


def thumbnail(data: bytes, size: int = APP_CONFIG.thumbnail_size) -> bytes:
    """
    Square thumbnail, stretched to size x size.
    """
    img = open_image(data).resize((size, size), Image.Resampling.BILINEAR)
    return PillowCodec().encode_raster(
        np.asarray(img, dtype=np.uint8), APP_CONFIG.lightweight_jpeg_quality
    )
