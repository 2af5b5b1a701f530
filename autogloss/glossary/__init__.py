"""Glossary compilation and loading."""
from .compiler import GlossaryCompiler, compile_glossaries, normalize_entry
from .loader import GlossaryLoader, load_glossaries

__all__ = [
    "GlossaryCompiler", "compile_glossaries", "normalize_entry",
    "GlossaryLoader", "load_glossaries",
]
