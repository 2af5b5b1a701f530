"""
Glossary compiler: raw per-language sources to indexed lookup structures.

A raw source looks like::

    {
        "lang": "en",
        "glossary_url": "/en/glossary",
        "entries": {
            "AMAB": {"short": "assigned male at birth"},
            "transman": {"short": "...", "variants": ["transmen"]},
            "GLAAD": {"ruby": "/ɡlæd/"},
        },
    }

Entry names are processed in sorted order. Every main form and every
variant becomes a key of the compiled glossary; a key registered twice
aborts compilation of that language.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Mapping, Optional

from ..core.exceptions import DuplicateTermError, InvalidEntryError
from ..core.models import Entry, Glossary, Pronunciation


logger = logging.getLogger(__name__)


def _optional_text(raw: Mapping[str, Any], key: str, entry_name: str, lang: str) -> Optional[str]:
    value = raw.get(key)
    if value is None or isinstance(value, str):
        return value
    raise InvalidEntryError(
        f"field '{key}' must be a string", entry=entry_name, language=lang
    )


def _pronunciations(raw: Mapping[str, Any], entry_name: str, lang: str) -> List[Pronunciation]:
    records = raw.get('pronunciations') or []
    if not isinstance(records, (list, tuple)):
        raise InvalidEntryError(
            "field 'pronunciations' must be a list", entry=entry_name, language=lang
        )

    result = []
    for record in records:
        if not isinstance(record, Mapping):
            raise InvalidEntryError(
                "pronunciation records must be mappings", entry=entry_name, language=lang
            )
        extra = {k: v for k, v in record.items() if k != 'IPA'}
        result.append(Pronunciation(ipa=record.get('IPA'), extra=extra))
    return result


def normalize_entry(entry_name: str, raw: Optional[Mapping[str, Any]], lang: str = "") -> Entry:
    """
    Build an Entry from raw source fields.

    Args:
        entry_name: Main form of the entry
        raw: Raw fields (``None`` is treated as an empty entry)
        lang: Language code, used in error reports

    Returns:
        Normalized, immutable Entry

    Raises:
        InvalidEntryError: If a field has the wrong shape
    """
    raw = raw or {}
    if not isinstance(raw, Mapping):
        raise InvalidEntryError("entry must be a mapping", entry=entry_name, language=lang)

    variants = raw.get('variants') or []
    if not isinstance(variants, (list, tuple)) or not all(isinstance(v, str) for v in variants):
        raise InvalidEntryError(
            "field 'variants' must be a list of strings", entry=entry_name, language=lang
        )

    render_as = raw.get('renderAs') or {}
    if not isinstance(render_as, Mapping):
        raise InvalidEntryError(
            "field 'renderAs' must be a mapping", entry=entry_name, language=lang
        )

    include_count = raw.get('pronunciations_to_include_in_short_form') or 0
    if isinstance(include_count, bool) or not isinstance(include_count, int) or include_count < 0:
        raise InvalidEntryError(
            "field 'pronunciations_to_include_in_short_form' must be a non-negative integer",
            entry=entry_name,
            language=lang
        )

    show_in_print = raw.get('show_in_print')
    if show_in_print is not None and not isinstance(show_in_print, bool):
        raise InvalidEntryError(
            "field 'show_in_print' must be a boolean", entry=entry_name, language=lang
        )

    return Entry(
        main_form=entry_name,
        ruby=_optional_text(raw, 'ruby', entry_name, lang),
        short=_optional_text(raw, 'short', entry_name, lang),
        long=_optional_text(raw, 'long', entry_name, lang),
        pronunciations=tuple(_pronunciations(raw, entry_name, lang)),
        pronunciations_to_include_in_short_form=include_count,
        render_as=dict(render_as),
        variants=tuple(variants),
        show_in_print=show_in_print,
    )


class GlossaryCompiler:
    """Compiles raw glossary sources, optionally several languages in parallel."""

    def __init__(self, max_workers: int = 1):
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        self.max_workers = max_workers

    def compile_language(self, lang: str, source: Mapping[str, Any]) -> Glossary:
        """
        Compile the source of a single language.

        Raises:
            DuplicateTermError: If a term or variant is declared twice
            InvalidEntryError: If the source or one of its entries is malformed
        """
        if not isinstance(source, Mapping):
            raise InvalidEntryError("glossary source must be a mapping", language=lang)

        raw_entries = source.get('entries') or {}
        if not isinstance(raw_entries, Mapping):
            raise InvalidEntryError("field 'entries' must be a mapping", language=lang)
        for entry_name in raw_entries:
            if not isinstance(entry_name, str):
                raise InvalidEntryError(
                    "entry names must be strings", entry=repr(entry_name), language=lang
                )

        terms: List[str] = []
        term_map: Dict[str, Entry] = {}
        entries = sorted(raw_entries.keys())

        for entry_name in entries:
            if entry_name in term_map:
                logger.error(f"Duplicate term '{entry_name}' in glossary '{lang}'")
                raise DuplicateTermError(entry_name, language=lang)

            entry = normalize_entry(entry_name, raw_entries[entry_name], lang)
            term_map[entry_name] = entry
            terms.append(entry_name)

            for variant_name in entry.variants:
                if variant_name in term_map:
                    logger.error(f"Duplicate variant '{variant_name}' in glossary '{lang}'")
                    raise DuplicateTermError(variant_name, language=lang)

                term_map[variant_name] = entry
                terms.append(variant_name)

        glossary = Glossary(
            lang=source.get('lang') or lang,
            glossary_url=source.get('glossary_url'),
            entries=tuple(entries),
            terms=tuple(terms),
            term_map=term_map,
            term_set=frozenset(terms),
        )
        logger.info(
            f"Compiled glossary '{lang}': {len(entries)} entries, {len(terms)} terms"
        )
        return glossary

    def compile(self, sources: Mapping[str, Mapping[str, Any]]) -> Dict[str, Glossary]:
        """
        Compile every language of ``sources``.

        Languages are independent. When several fail, the error of the
        first failing language in ``sources`` order propagates.
        """
        if self.max_workers == 1 or len(sources) < 2:
            return {lang: self.compile_language(lang, src) for lang, src in sources.items()}

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {
                lang: executor.submit(self.compile_language, lang, src)
                for lang, src in sources.items()
            }
            return {lang: future.result() for lang, future in futures.items()}


def compile_glossaries(
    sources: Mapping[str, Mapping[str, Any]],
    max_workers: int = 1
) -> Dict[str, Glossary]:
    """Compile raw sources keyed by language."""
    return GlossaryCompiler(max_workers=max_workers).compile(sources)
