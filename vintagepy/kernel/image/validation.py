from typing import Any, cast
import numpy as np
from vintagepy.domain.types import ImageBuffer


def ensure_image(arr: Any) -> ImageBuffer:
    """
    Ensures the input is a float32 numpy array and returns it as an ImageBuffer.
    This is preferred over a raw cast because it performs runtime validation.
    """
    if not isinstance(arr, np.ndarray):
        raise TypeError(f"Expected numpy.ndarray, got {type(arr)}")

    if arr.dtype != np.float32:
        arr = arr.astype(np.float32)

    return cast(ImageBuffer, arr)


def ensure_rgb(img: np.ndarray) -> np.ndarray:
    """
    Ensures the input image is a 3-channel RGB array.
    """
    if img.ndim == 2:
        return cast(np.ndarray, np.stack([img] * 3, axis=-1))
    if img.ndim == 3 and img.shape[2] == 1:
        return cast(np.ndarray, np.concatenate([img] * 3, axis=-1))
    if img.ndim == 3 and img.shape[2] == 4:
        return cast(np.ndarray, img[:, :, :3])
    return img
