__version__ = "Unknown-dev"

from pathlib import Path

# Read version from VERSION file if it exists
_version_file = Path(__file__).parent / "VERSION"
if _version_file.exists():
    __version__ = _version_file.read_text().strip()

from vintagepy.domain.errors import (  # noqa: E402
    CGImageCreationFailed,
    CoreImageFilterFailed,
    DataConversionFailed,
    FilterError,
    InvalidInputData,
)
from vintagepy.domain.models import FilterStyle, Tier  # noqa: E402
from vintagepy.services.filter_service import VintageFilterService  # noqa: E402
from vintagepy.services.rendering.engine import VintageEngine  # noqa: E402

__all__ = [
    "CGImageCreationFailed",
    "CoreImageFilterFailed",
    "DataConversionFailed",
    "FilterError",
    "FilterStyle",
    "InvalidInputData",
    "Tier",
    "VintageEngine",
    "VintageFilterService",
]
