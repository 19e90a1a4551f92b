from typing import TypeAlias, Tuple
import numpy as np
import numpy.typing as npt


# Image Types
# Floating point sRGB image 0.0 - 1.0 (Height, Width, 3)
ImageBuffer: TypeAlias = npt.NDArray[np.float32]

# (Height, Width)
Dimensions: TypeAlias = Tuple[int, int]

# (R, G, B) coefficients of one color-matrix row, or a bias vector
Vector3: TypeAlias = Tuple[float, float, float]

# Rec. 709 luma weights
LUMA_R = 0.2126
LUMA_G = 0.7152
LUMA_B = 0.0722
