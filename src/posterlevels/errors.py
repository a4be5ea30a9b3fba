"""Custom exception hierarchy for PosterLevels."""


class PosterLevelsError(Exception):
    """Base exception for all PosterLevels errors."""


class ValidationError(PosterLevelsError):
    """Input validation failures."""


class InvalidParameterError(ValidationError):
    """A posterization parameter or table is unusable (e.g. one level)."""


class ImageError(PosterLevelsError):
    """Errors related to image loading or processing."""


class ImageFormatError(ImageError):
    """Unsupported or corrupted image format."""


class ImageDimensionError(ImageError):
    """Image dimensions exceed limits or are mismatched."""


class InvalidInputError(ImageError):
    """Pixel buffer does not match its declared width and height."""
