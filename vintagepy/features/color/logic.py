import numpy as np
from numba import njit  # type: ignore
from typing import Tuple
from vintagepy.domain.types import ImageBuffer
from vintagepy.features.color.models import ColorMatrix, PhotoEffect
from vintagepy.kernel.image.logic import get_luminance, linear_to_srgb, srgb_to_linear
from vintagepy.kernel.image.validation import ensure_image
from vintagepy.kernel.performance import time_function

SEPIA_MATRIX = np.array(
    [
        [0.393, 0.769, 0.189],
        [0.349, 0.686, 0.168],
        [0.272, 0.534, 0.131],
    ],
    dtype=np.float32,
)

# Bradford cone response
BRADFORD = np.array(
    [
        [0.8951, 0.2664, -0.1614],
        [-0.7502, 1.7135, 0.0367],
        [0.0389, -0.0685, 1.0296],
    ],
    dtype=np.float64,
)

# Linear sRGB (D65) -> XYZ
SRGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ],
    dtype=np.float64,
)

# Duv offset per unit of tint
TINT_SCALE = 5e-5


@njit(nogil=True)
def _apply_matrix_jit(
    img: np.ndarray, matrix: np.ndarray, bias: np.ndarray
) -> np.ndarray:
    """
    Fast JIT application of a 3x3 matrix plus bias to every pixel.
    Releases the GIL so independent invocations can run on worker threads.
    """
    h, w, c = img.shape
    res = np.empty_like(img)
    for y in range(h):
        for x in range(w):
            r = img[y, x, 0]
            g = img[y, x, 1]
            b = img[y, x, 2]
            for ch in range(3):
                res[y, x, ch] = (
                    r * matrix[ch, 0]
                    + g * matrix[ch, 1]
                    + b * matrix[ch, 2]
                    + bias[ch]
                )
    return res


def apply_matrix(img: ImageBuffer, matrix: np.ndarray, bias: np.ndarray) -> ImageBuffer:
    res = _apply_matrix_jit(
        np.ascontiguousarray(img, dtype=np.float32),
        np.ascontiguousarray(matrix, dtype=np.float32),
        np.ascontiguousarray(bias, dtype=np.float32),
    )
    return ensure_image(res)


def apply_saturation(img: ImageBuffer, saturation: float) -> ImageBuffer:
    lum = get_luminance(img)[..., None]
    return ensure_image(lum + (img - lum) * saturation)


@time_function
def apply_color_controls(
    img: ImageBuffer, saturation: float, brightness: float, contrast: float
) -> ImageBuffer:
    """
    Chroma multiply around luma, additive brightness, contrast around mid-gray.
    """
    res = apply_saturation(img, saturation)
    res = res + brightness
    res = (res - 0.5) * contrast + 0.5
    return ensure_image(np.clip(res, 0.0, 1.0))


@time_function
def apply_color_matrix(img: ImageBuffer, grade: ColorMatrix) -> ImageBuffer:
    matrix = np.array(grade.rows(), dtype=np.float32)
    bias = np.array(grade.bias, dtype=np.float32)
    return ensure_image(np.clip(apply_matrix(img, matrix, bias), 0.0, 1.0))


@time_function
def apply_sepia(img: ImageBuffer, intensity: float) -> ImageBuffer:
    if intensity <= 0:
        return img
    toned = apply_matrix(img, SEPIA_MATRIX, np.zeros(3, dtype=np.float32))
    res = img * (1.0 - intensity) + toned * intensity
    return ensure_image(np.clip(res, 0.0, 1.0))


def _tone_curve(img: ImageBuffer, curve: float) -> ImageBuffer:
    """
    Blends identity with smoothstep. Negative strength flattens midtones.
    """
    if curve == 0.0:
        return img
    smooth = img * img * (3.0 - 2.0 * img)
    return ensure_image(img * (1.0 - curve) + smooth * curve)


@time_function
def apply_photo_effect(img: ImageBuffer, effect: PhotoEffect) -> ImageBuffer:
    """
    Establishes the photographic character of a look in one pass.
    """
    res = np.clip(apply_color_matrix(img, effect.response), 0.0, 1.0)
    res = apply_saturation(res, effect.saturation)
    res = _tone_curve(np.clip(res, 0.0, 1.0), effect.curve)
    res = res * (effect.white_point - effect.black_lift) + effect.black_lift
    return ensure_image(np.clip(res, 0.0, 1.0))


def planckian_xy(temperature: float) -> Tuple[float, float]:
    """
    CIE 1931 xy of a blackbody (Kim et al. cubic approximation).
    """
    t = float(np.clip(temperature, 1667.0, 25000.0))
    if t <= 4000.0:
        x = -0.2661239e9 / t**3 - 0.2343589e6 / t**2 + 0.8776956e3 / t + 0.179910
    else:
        x = -3.0258469e9 / t**3 + 2.1070379e6 / t**2 + 0.2226347e3 / t + 0.240390

    if t <= 2222.0:
        y = -1.1063814 * x**3 - 1.34811020 * x**2 + 2.18555832 * x - 0.20219683
    elif t <= 4000.0:
        y = -0.9549476 * x**3 - 1.37418593 * x**2 + 2.09137015 * x - 0.16748867
    else:
        y = 3.0817580 * x**3 - 5.87338670 * x**2 + 3.75112997 * x - 0.37001483
    return x, y


def _xy_to_uv(x: float, y: float) -> Tuple[float, float]:
    d = -2.0 * x + 12.0 * y + 3.0
    return 4.0 * x / d, 6.0 * y / d


def _uv_to_xy(u: float, v: float) -> Tuple[float, float]:
    d = 2.0 * u - 8.0 * v + 4.0
    return 3.0 * u / d, 2.0 * v / d


def white_point_xyz(temperature: float, tint: float) -> np.ndarray:
    """
    XYZ (Y = 1) of the neutral at a color temperature shifted by tint.
    """
    u, v = _xy_to_uv(*planckian_xy(temperature))
    if tint != 0.0:
        u_lo, v_lo = _xy_to_uv(*planckian_xy(temperature - 50.0))
        u_hi, v_hi = _xy_to_uv(*planckian_xy(temperature + 50.0))
        du, dv = u_hi - u_lo, v_hi - v_lo
        norm = float(np.hypot(du, dv)) or 1.0
        # Normal pointing below the locus (magenta side)
        nu, nv = -dv / norm, du / norm
        if nv > 0:
            nu, nv = -nu, -nv
        u += nu * tint * TINT_SCALE
        v += nv * tint * TINT_SCALE
    x, y = _uv_to_xy(u, v)
    return np.array([x / y, 1.0, (1.0 - x - y) / y], dtype=np.float64)


def adaptation_matrix(
    neutral: Tuple[float, float], target: Tuple[float, float]
) -> np.ndarray:
    """
    Linear sRGB matrix mapping the neutral white onto the target white.
    """
    lms_src = BRADFORD @ white_point_xyz(*neutral)
    lms_dst = BRADFORD @ white_point_xyz(*target)
    scale = np.diag(lms_dst / lms_src)
    xyz_adapt = np.linalg.inv(BRADFORD) @ scale @ BRADFORD
    return np.linalg.inv(SRGB_TO_XYZ) @ xyz_adapt @ SRGB_TO_XYZ


@time_function
def apply_temperature_tint(
    img: ImageBuffer,
    temperature: float,
    tint: float,
    neutral: Tuple[float, float] = (6500.0, 0.0),
) -> ImageBuffer:
    """
    Chromatic adaptation from the reference neutral to (temperature, tint).
    A target below the neutral temperature warms the image.
    """
    if (temperature, tint) == tuple(neutral):
        return img
    matrix = adaptation_matrix(neutral, (temperature, tint))
    linear = srgb_to_linear(img)
    adapted = apply_matrix(linear, matrix, np.zeros(3, dtype=np.float32))
    return linear_to_srgb(np.clip(adapted, 0.0, 1.0))
