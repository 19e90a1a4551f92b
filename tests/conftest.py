import io

import numpy as np
import pytest
from PIL import Image


def encode_png(arr: np.ndarray) -> bytes:
    buf = io.BytesIO()
    Image.fromarray(arr).save(buf, format="PNG")
    return buf.getvalue()


def decode_bytes(data: bytes) -> np.ndarray:
    return np.asarray(Image.open(io.BytesIO(data)).convert("RGB"), dtype=np.uint8)


def make_gradient(height: int = 24, width: int = 32) -> np.ndarray:
    """Colorful test card: horizontal red ramp, vertical green ramp, blue checker."""
    ys = np.linspace(0, 255, height, dtype=np.float32)[:, None]
    xs = np.linspace(0, 255, width, dtype=np.float32)[None, :]
    img = np.zeros((height, width, 3), dtype=np.uint8)
    img[..., 0] = np.broadcast_to(xs, (height, width)).astype(np.uint8)
    img[..., 1] = np.broadcast_to(ys, (height, width)).astype(np.uint8)
    checker = ((np.arange(height)[:, None] // 4 + np.arange(width)[None, :] // 4) % 2) * 200
    img[..., 2] = checker.astype(np.uint8)
    return img


@pytest.fixture
def gradient_png() -> bytes:
    return encode_png(make_gradient())


@pytest.fixture
def red_png() -> bytes:
    img = np.zeros((64, 64, 3), dtype=np.uint8)
    img[..., 0] = 255
    return encode_png(img)


@pytest.fixture
def gray_image() -> np.ndarray:
    return np.full((16, 16, 3), 0.5, dtype=np.float32)
