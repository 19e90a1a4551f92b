import math
import numpy as np
import cv2
from vintagepy.domain.types import ImageBuffer
from vintagepy.kernel.image.logic import get_luminance
from vintagepy.kernel.image.validation import ensure_image
from vintagepy.kernel.performance import time_function

# Pixels of blur sigma per unit of highlight/shadow radius
TONE_RADIUS_SCALE = 8.0
SHADOW_GAIN = 0.25
HIGHLIGHT_GAIN = 0.5


def gaussian_blur(img: np.ndarray, radius: float) -> np.ndarray:
    if radius <= 0:
        return img
    return cv2.GaussianBlur(
        img, (0, 0), sigmaX=radius, sigmaY=radius, borderType=cv2.BORDER_REFLECT
    )


def blend_multiply(base: ImageBuffer, layer: np.ndarray) -> ImageBuffer:
    if layer.ndim == 2:
        layer = layer[..., None]
    return ensure_image(np.clip(base * layer, 0.0, 1.0))


def blend_soft_light(base: ImageBuffer, layer: ImageBuffer) -> ImageBuffer:
    """
    W3C soft-light composite of layer over base.
    """
    b = np.clip(base, 0.0, 1.0)
    s = np.clip(layer, 0.0, 1.0)
    d = np.where(b <= 0.25, ((16.0 * b - 12.0) * b + 4.0) * b, np.sqrt(b))
    res = np.where(
        s <= 0.5,
        b - (1.0 - 2.0 * s) * b * (1.0 - b),
        b + (2.0 * s - 1.0) * (d - b),
    )
    return ensure_image(np.clip(res, 0.0, 1.0))


def vignette_mask(height: int, width: int, intensity: float, radius: float) -> np.ndarray:
    """
    Multiplicative falloff: 1 at center, 1 - intensity where the normalized
    distance reaches radius.
    """
    ys = (np.arange(height, dtype=np.float32) + 0.5) - height / 2.0
    xs = (np.arange(width, dtype=np.float32) + 0.5) - width / 2.0
    half_diag = math.hypot(height, width) / 2.0
    dist = np.sqrt(ys[:, None] ** 2 + xs[None, :] ** 2) / half_diag
    falloff = np.clip(dist / max(radius, 1e-6), 0.0, 1.0) ** 2
    return (1.0 - intensity * falloff).astype(np.float32)


@time_function
def apply_vignette(img: ImageBuffer, intensity: float, radius: float) -> ImageBuffer:
    if intensity == 0:
        return img
    h, w = img.shape[:2]
    return blend_multiply(img, vignette_mask(h, w, intensity, radius))


def generate_grain(
    height: int, width: int, seed: int, scale: float = 1.5
) -> np.ndarray:
    """
    Monochrome noise field covering (height, width), values in [0, 1].
    """
    rng = np.random.default_rng(seed)
    small_h = max(1, math.ceil(height / scale))
    small_w = max(1, math.ceil(width / scale))
    noise = rng.random((small_h, small_w, 3), dtype=np.float32)

    scaled = cv2.resize(
        noise,
        (max(width, math.ceil(small_w * scale)), max(height, math.ceil(small_h * scale))),
        interpolation=cv2.INTER_LINEAR,
    )
    cropped = scaled[:height, :width]
    return get_luminance(cropped)


@time_function
def apply_film_grain(img: ImageBuffer, intensity: float, seed: int, scale: float = 1.5) -> ImageBuffer:
    """
    Multiplies an attenuated monochrome noise layer onto the image.
    """
    if intensity <= 0:
        return img
    h, w = img.shape[:2]
    grain = generate_grain(h, w, seed, scale)
    layer = 1.0 - intensity * (1.0 - grain)
    return blend_multiply(img, layer)


@time_function
def apply_soft_glow(img: ImageBuffer, radius: float = 5.0) -> ImageBuffer:
    blurred = ensure_image(gaussian_blur(img, radius))
    return blend_soft_light(img, blurred)


@time_function
def apply_highlight_shadow(
    img: ImageBuffer, highlight_amount: float, shadow_amount: float, radius: float
) -> ImageBuffer:
    """
    Lifts shadows and compresses highlights using a blurred luminance mask.
    """
    lum = get_luminance(img)
    base = gaussian_blur(lum, max(radius, 0.0) * TONE_RADIUS_SCALE)

    shadow_mask = (1.0 - base) ** 2
    highlight_mask = base**2

    new_lum = lum + shadow_amount * SHADOW_GAIN * shadow_mask * (1.0 - lum)
    new_lum = new_lum * (1.0 - (1.0 - highlight_amount) * HIGHLIGHT_GAIN * highlight_mask)

    res = img + (new_lum - lum)[..., None]
    return ensure_image(np.clip(res, 0.0, 1.0))
