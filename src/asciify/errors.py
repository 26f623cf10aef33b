class AsciifyError(Exception):
    """Base class for conversion failures."""


class ImageNotFoundError(AsciifyError, FileNotFoundError):
    """The input path does not resolve to a readable file."""


class ImageDecodeError(AsciifyError, ValueError):
    """The input bytes are not a PNG or JPEG image."""


class ArtifactWriteError(AsciifyError, OSError):
    """The output text file could not be written."""
