"""
exceptions.py — ReefWatch Error Types
-------------------------------------

Exception classes raised by the upload, frame sampling and AI analysis layers.
Validation errors are shown to the user; everything else is caught by the
analysis layer and replaced with a demo-mode result.
"""


class ReefWatchError(Exception):
    """Base exception for all ReefWatch errors"""
    pass


class MediaValidationError(ReefWatchError):
    """Raised when an uploaded file has an unsupported type or is too large"""
    pass


class AnalysisResponseError(ReefWatchError):
    """Raised when the AI model reply cannot be parsed into an analysis"""
    pass


class FrameExtractionError(ReefWatchError):
    """Raised when no usable frame can be read from a video"""
    pass


class ClientUnavailableError(ReefWatchError):
    """Raised when the Gemini client cannot be built (missing or placeholder key)"""
    pass
