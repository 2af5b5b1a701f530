"""
Custom exceptions for the glossary annotation system.
Provides clear error hierarchy and meaningful error messages.
"""

from contextlib import contextmanager
from typing import Optional, Dict, Any, Type
import logging

__all__ = [
    # Base
    'AutoGlossError',
    # Glossary
    'GlossaryError', 'DuplicateTermError', 'InvalidEntryError', 'GlossaryReadError',
    # Annotation
    'AnnotationError', 'InvariantViolationError', 'TermLookupError',
    # Localization
    'LocalizationError', 'MissingMessageError',
    # Configuration
    'ConfigurationError',
    # Utilities
    'error_context', 'wrap_error',
]


# ============================================================================
# BASE EXCEPTION
# ============================================================================

class AutoGlossError(Exception):
    """
    Base exception for all autogloss errors.

    All custom exceptions inherit from this class for unified error handling.
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize exception with message and optional context.

        Args:
            message: Error message
            **context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context."""
        if not self.context:
            return self.message

        context_str = ', '.join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} ({context_str})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'context': self.context
        }


# ============================================================================
# GLOSSARY EXCEPTIONS
# ============================================================================

class GlossaryError(AutoGlossError):
    """Base exception for glossary compilation and loading errors."""
    pass


class DuplicateTermError(GlossaryError):
    """Raised when a term or variant is registered twice in one language."""

    def __init__(self, term: str, language: Optional[str] = None, **context: Any) -> None:
        super().__init__(
            f"conflict of definitions for term: {term}",
            term=term,
            language=language,
            **context
        )
        self.term = term
        self.language = language


class InvalidEntryError(GlossaryError):
    """Raised when a raw glossary entry has malformed fields."""

    def __init__(
        self,
        message: str,
        entry: Optional[str] = None,
        language: Optional[str] = None,
        **context: Any
    ) -> None:
        super().__init__(message, entry=entry, language=language, **context)
        self.entry = entry
        self.language = language


class GlossaryReadError(GlossaryError):
    """Raised when a glossary source file cannot be read or parsed."""

    def __init__(self, message: str, path: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, path=path, **context)
        self.path = path


# ============================================================================
# ANNOTATION EXCEPTIONS
# ============================================================================

class AnnotationError(AutoGlossError):
    """Base exception for annotation errors."""
    pass


class InvariantViolationError(AnnotationError):
    """Raised when markup generation reaches a state the compiler rules out."""
    pass


class TermLookupError(InvariantViolationError):
    """Raised when a term passes the membership check but has no entry."""

    def __init__(self, term: str, language: Optional[str] = None, **context: Any) -> None:
        super().__init__(
            f"no glossary entry for term: {term}",
            term=term,
            language=language,
            **context
        )
        self.term = term
        self.language = language


# ============================================================================
# LOCALIZATION EXCEPTIONS
# ============================================================================

class LocalizationError(AutoGlossError):
    """Base exception for message lookup errors."""
    pass


class MissingMessageError(LocalizationError):
    """Raised when a message key is not defined for a language or its fallback."""

    def __init__(self, lang: str, key: str, **context: Any) -> None:
        super().__init__(f"missing message: {key}", lang=lang, key=key, **context)
        self.lang = lang
        self.key = key


# ============================================================================
# CONFIGURATION EXCEPTIONS
# ============================================================================

class ConfigurationError(AutoGlossError):
    """Raised when application or component configuration is invalid."""

    def __init__(self, message: str, component: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, component=component, **context)
        self.component = component


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================

def wrap_error(
    error: Exception,
    error_class: Type[AutoGlossError],
    message: Optional[str] = None,
    **context: Any
) -> AutoGlossError:
    """
    Wrap an exception in a custom exception type.

    Args:
        error: Original exception
        error_class: Exception class to wrap with
        message: Optional custom message
        **context: Keyword arguments forwarded to error_class

    Returns:
        Wrapped exception with ``__cause__`` set to the original

    Raises:
        TypeError: If error_class is not an AutoGlossError subclass

    Example:
        >>> try:
        ...     raise ValueError("bad document")
        ... except ValueError as e:
        ...     raise wrap_error(e, GlossaryReadError, "Cannot parse", path="en/_glossary.yaml")
    """
    if not issubclass(error_class, AutoGlossError):
        raise TypeError(
            f"error_class must be subclass of AutoGlossError, "
            f"got {error_class.__name__}"
        )

    error_msg = f"{message}: {error}" if message else str(error)
    wrapped = error_class(error_msg, **context)
    wrapped.__cause__ = error
    return wrapped


@contextmanager
def error_context(
    operation: str,
    error_class: Type[AutoGlossError] = AutoGlossError,
    logger: Optional[logging.Logger] = None,
    **context: Any
):
    """
    Context manager for consistent error handling and wrapping.

    Errors that are already ``AutoGlossError`` instances pass through
    untouched; anything else is logged (if a logger is given) and wrapped
    in ``error_class``.

    Example:
        >>> with error_context("reading glossary", GlossaryReadError, path=str(path)):
        ...     data = yaml.safe_load(handle)
    """
    try:
        yield
    except AutoGlossError:
        raise
    except KeyboardInterrupt:
        raise
    except Exception as e:
        if logger:
            logger.error(f"Error during {operation}: {e}", exc_info=True)

        raise wrap_error(e, error_class, f"Error during {operation}", **context)
