import numpy as np
from vintagepy.domain.types import LUMA_B, LUMA_G, LUMA_R, ImageBuffer
from vintagepy.kernel.image.validation import ensure_image


def get_luminance(img: ImageBuffer) -> ImageBuffer:
    """
    Relative luminance using Rec. 709 coefficients.
    """
    res = LUMA_R * img[..., 0] + LUMA_G * img[..., 1] + LUMA_B * img[..., 2]
    return ensure_image(res)


def uint8_to_float32(arr: np.ndarray) -> ImageBuffer:
    return ensure_image(arr.astype(np.float32) / 255.0)


def float_to_uint8(img: ImageBuffer) -> np.ndarray:
    return np.clip(np.round(img * 255.0), 0, 255).astype(np.uint8)


def srgb_to_linear(img: ImageBuffer) -> ImageBuffer:
    img = np.clip(img, 0.0, 1.0)
    res = np.where(img <= 0.04045, img / 12.92, ((img + 0.055) / 1.055) ** 2.4)
    return ensure_image(res)


def linear_to_srgb(img: ImageBuffer) -> ImageBuffer:
    img = np.clip(img, 0.0, 1.0)
    res = np.where(
        img <= 0.0031308, img * 12.92, 1.055 * np.power(img, 1.0 / 2.4) - 0.055
    )
    return ensure_image(res)
