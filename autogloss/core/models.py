"""
Core data models for compiled glossaries.

Entries are shared by reference between a main form and all of its
variants, so every model here is frozen and exposes its mappings through
``MappingProxyType``. Nothing is mutated after compilation.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, FrozenSet, Iterator, Mapping, Optional, Tuple

from .exceptions import TermLookupError


# ============================================================================
# CONSTANTS
# ============================================================================

_EMPTY_MAPPING: Mapping[str, Any] = MappingProxyType({})


# ============================================================================
# ENTRY MODELS
# ============================================================================

@dataclass(frozen=True)
class Pronunciation:
    """One pronunciation record of an entry."""
    ipa: Optional[str] = None
    extra: Mapping[str, Any] = field(default_factory=lambda: _EMPTY_MAPPING)

    def __post_init__(self):
        if not isinstance(self.extra, MappingProxyType):
            object.__setattr__(self, 'extra', MappingProxyType(dict(self.extra)))


@dataclass(frozen=True)
class Entry:
    """
    Canonical glossary definition, shared by a main form and its variants.

    Optional text fields are ``None`` when the source does not define them;
    an explicit empty string is kept as ``""``.
    """
    main_form: str
    ruby: Optional[str] = None
    short: Optional[str] = None
    long: Optional[str] = None
    pronunciations: Tuple[Pronunciation, ...] = ()
    pronunciations_to_include_in_short_form: int = 0
    render_as: Mapping[str, str] = field(default_factory=lambda: _EMPTY_MAPPING)
    variants: Tuple[str, ...] = ()
    show_in_print: Optional[bool] = None

    def __post_init__(self):
        if not isinstance(self.render_as, MappingProxyType):
            object.__setattr__(self, 'render_as', MappingProxyType(dict(self.render_as)))
        object.__setattr__(self, 'pronunciations', tuple(self.pronunciations))
        object.__setattr__(self, 'variants', tuple(self.variants))

    @property
    def has_definition(self) -> bool:
        return self.short is not None or self.long is not None

    def display_text(self, surface_form: str) -> str:
        """Text shown for ``surface_form``, honouring ``render_as`` overrides."""
        return self.render_as.get(surface_form, surface_form)


# ============================================================================
# GLOSSARY
# ============================================================================

@dataclass(frozen=True)
class Glossary:
    """
    Compiled, read-only glossary for one language.

    Attributes:
        lang: Language code
        glossary_url: Base URL of the standalone glossary page, if any
        entries: Sorted main forms
        terms: Main forms each followed by their variants, in processing order
        term_map: Every term and variant mapped to its shared Entry
        term_set: Membership set over the keys of ``term_map``; derived
            from ``term_map`` when None
    """
    lang: str
    glossary_url: Optional[str] = None
    entries: Tuple[str, ...] = ()
    terms: Tuple[str, ...] = ()
    term_map: Mapping[str, Entry] = field(default_factory=lambda: _EMPTY_MAPPING)
    term_set: Optional[FrozenSet[str]] = None

    def __post_init__(self):
        if not isinstance(self.term_map, MappingProxyType):
            object.__setattr__(self, 'term_map', MappingProxyType(dict(self.term_map)))
        object.__setattr__(self, 'entries', tuple(self.entries))
        object.__setattr__(self, 'terms', tuple(self.terms))
        if self.term_set is None:
            object.__setattr__(self, 'term_set', frozenset(self.term_map))
        else:
            object.__setattr__(self, 'term_set', frozenset(self.term_set))
            if self.term_set != frozenset(self.term_map):
                raise ValueError(f"term_set does not match term_map in glossary '{self.lang}'")

    def __contains__(self, term: object) -> bool:
        return term in self.term_set

    def __len__(self) -> int:
        return len(self.term_set)

    def __iter__(self) -> Iterator[str]:
        return iter(self.terms)

    def lookup(self, term: str) -> Entry:
        """Resolve a term or variant to its entry."""
        try:
            return self.term_map[term]
        except KeyError:
            raise TermLookupError(term, language=self.lang) from None

    def entry_url(self, entry: Entry) -> Optional[str]:
        """Deep link to ``entry`` on the glossary page, or None without a base URL."""
        if self.glossary_url is None:
            return None
        return f"{self.glossary_url}/#entry_{entry.main_form}"

    def get_stats(self) -> Mapping[str, Any]:
        return {
            'lang': self.lang,
            'entries': len(self.entries),
            'terms': len(self.terms),
            'variants': len(self.terms) - len(self.entries),
        }
