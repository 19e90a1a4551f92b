"""
Closed error taxonomy surfaced by the filter pipeline.

Only the hard boundary operations raise these: decoding the input,
materializing the final buffer, encoding the output, and constructing a
pipeline on an engine that has no operators at all.
"""


class FilterError(Exception):
    """
    Base class of every error a pipeline invocation can surface.
    """

    description = "Image processing failed"

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        message = f"{self.description}: {detail}" if detail else self.description
        super().__init__(message)


class InvalidInputData(FilterError):
    description = "Invalid input image data"


class CoreImageFilterFailed(FilterError):
    description = "Core Image filter failed"


class CGImageCreationFailed(FilterError):
    description = "Failed to create final image"


class DataConversionFailed(FilterError):
    description = "Failed to convert image to data"
