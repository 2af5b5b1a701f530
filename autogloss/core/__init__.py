"""Core models and exceptions."""
from .exceptions import (
    AutoGlossError,
    GlossaryError,
    DuplicateTermError,
    InvalidEntryError,
    GlossaryReadError,
    AnnotationError,
    InvariantViolationError,
    TermLookupError,
    LocalizationError,
    MissingMessageError,
    ConfigurationError,
)
from .models import Entry, Glossary, Pronunciation

__all__ = [
    "Entry", "Glossary", "Pronunciation",
    "AutoGlossError", "GlossaryError", "DuplicateTermError", "InvalidEntryError",
    "GlossaryReadError", "AnnotationError", "InvariantViolationError",
    "TermLookupError", "LocalizationError", "MissingMessageError",
    "ConfigurationError",
]
