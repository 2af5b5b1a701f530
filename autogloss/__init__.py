"""autogloss - glossary-term annotation for generated documents."""
__version__ = "1.0.0"

from autogloss.annotator import Annotator, AnnotationResult, annotate
from autogloss.core.exceptions import AutoGlossError, DuplicateTermError
from autogloss.core.models import Entry, Glossary, Pronunciation
from autogloss.glossary import GlossaryCompiler, GlossaryLoader, compile_glossaries, load_glossaries
from autogloss.i18n import ILocalizer, MessageCatalog

__all__ = [
    "Annotator",
    "AnnotationResult",
    "annotate",
    "AutoGlossError",
    "DuplicateTermError",
    "Entry",
    "Glossary",
    "Pronunciation",
    "GlossaryCompiler",
    "GlossaryLoader",
    "compile_glossaries",
    "load_glossaries",
    "ILocalizer",
    "MessageCatalog",
]
