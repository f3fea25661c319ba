"""
Exception hierarchy for Picoblog.

Every error carries a machine-readable code, an optional context mapping and
a short message suitable for showing on the command line.
"""

from typing import Any, Dict, Optional


def create_error_context(**kwargs: Any) -> Dict[str, Any]:
    """Build an error context mapping, dropping unset values."""
    return {key: value for key, value in kwargs.items() if value is not None}


class PicoblogException(Exception):
    """Base exception for all Picoblog errors."""

    def __init__(self,
                 message: str,
                 error_code: str,
                 context: Optional[Dict[str, Any]] = None,
                 user_message: Optional[str] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.user_message = user_message or message
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for structured logging."""
        data = {
            "error_code": self.error_code,
            "message": self.message,
            "user_message": self.user_message,
            "context": self.context,
        }
        if self.cause is not None:
            data["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return data

    def to_log_string(self) -> str:
        """Format as a single log line."""
        parts = [f"[{self.error_code}] {self.message}"]
        if self.context:
            details = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f"({details})")
        if self.cause is not None:
            parts.append(f"caused by {type(self.cause).__name__}: {self.cause}")
        return " ".join(parts)

    def __str__(self) -> str:
        return self.message


class ConfigurationError(PicoblogException):
    """Invalid or incomplete run configuration."""

    def __init__(self, message: str, error_code: str = "CONFIG_INVALID", **kwargs):
        super().__init__(message, error_code, **kwargs)


class ManifestError(PicoblogException):
    """The post list file is missing, unreadable or malformed."""

    def __init__(self, message: str, error_code: str = "MANIFEST_INVALID", **kwargs):
        super().__init__(message, error_code, **kwargs)


class PostLoadError(PicoblogException):
    """A single post could not be read."""

    def __init__(self, path: str, reason: str, **kwargs):
        kwargs.setdefault("context", create_error_context(path=path, operation="load_post"))
        super().__init__(
            message=f"failed to load post {path!r}: {reason}",
            error_code="POST_LOAD_FAILED",
            **kwargs
        )
        self.path = path
        self.reason = reason


class NoPostsError(PicoblogException):
    """Nothing left to render."""

    def __init__(self, message: str = "No post provided", **kwargs):
        super().__init__(message, "NO_POSTS", **kwargs)


class RenderError(PicoblogException):
    """The output document could not be produced."""

    def __init__(self, message: str, error_code: str = "RENDER_FAILED", **kwargs):
        super().__init__(message, error_code, **kwargs)


class FeedGenerationError(RenderError):
    """RSS or Atom serialization failed."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, error_code="FEED_GENERATION_FAILED", **kwargs)


def handle_unexpected_error(error: BaseException) -> PicoblogException:
    """Wrap an arbitrary exception so it can be logged like the others."""
    if isinstance(error, PicoblogException):
        return error
    return PicoblogException(
        message=f"Unexpected error: {error}",
        error_code="UNEXPECTED_ERROR",
        context=create_error_context(error_type=type(error).__name__),
        user_message="An unexpected error occurred",
        cause=error,
    )
