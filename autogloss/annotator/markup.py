"""
Markup generation for a single glossed term.

Output shape for an entry with a definition::

    <span class="glossed-block">
      [<ruby class="glossed-ruby">]<dfn class="glossed-main"><a href="#">TERM</a></dfn>
        [<rp>(</rp><rt>RUBY</rt><rp>)</rp></ruby>]
      [<span class="glossed-print"> (SHORT FORM) </span>]
      <span class="glossed-tooltip">SHORT FORM <a href="URL/#entry_MAIN">Read more</a></span>
    </span>

(whitespace added for readability; none is emitted). Entries without
``short`` or ``long`` only get the bare term, optionally inside ``<ruby>``.
"""
import re
from typing import Optional

from ..core.exceptions import InvariantViolationError
from ..core.models import Entry, Glossary
from ..i18n.catalog import GO_TO_GLOSSARY_KEY, READ_MORE_KEY, ILocalizer


_PUNCTUATION = re.compile(r'[.,:;!@]')


def is_first_punctuation(span: Optional[str]) -> Optional[bool]:
    """
    Whether ``span`` starts with one of ``. , : ; ! @``.

    Returns None (not False) when there is no span.
    """
    if span is None:
        return None
    return bool(_PUNCTUATION.match(span[:1]))


def aggregate_pronunciations(entry: Entry) -> str:
    """
    Pronunciation prefix of the short form.

    NOTE: the break below fires on the first pass because the count starts
    at zero and is compared with ``<=``, so nothing is ever aggregated.
    Kept as-is until the intended inclusion rule is decided.
    """
    if entry.pronunciations_to_include_in_short_form <= 0:
        return ''

    count = 0
    pronunciations = ''
    for pronunciation in entry.pronunciations:
        if count <= entry.pronunciations_to_include_in_short_form:
            break

        if pronunciation.ipa is not None:
            if pronunciations:
                pronunciations += ', '
            pronunciations += pronunciation.ipa
            count += 1

    if pronunciations:
        pronunciations = f'<span class="pronunciations">{pronunciations}. </span>'
    return pronunciations


def short_form(entry: Entry) -> Optional[str]:
    """Aggregated pronunciations followed by the short definition."""
    pronunciations = aggregate_pronunciations(entry)
    if not pronunciations and entry.short is None:
        return None
    return pronunciations + (entry.short or '')


def _core_node(entry: Entry, term: str) -> str:
    if entry.has_definition:
        return f'<dfn class="glossed-main"><a href="#">{term}</a></dfn>'
    return term


def _ruby_node(entry: Entry, core: str) -> str:
    if entry.ruby is None:
        return core

    opening = '<ruby class="glossed-ruby">' if entry.has_definition else '<ruby>'
    return f'{opening}{core}<rp>(</rp><rt>{entry.ruby}</rt><rp>)</rp></ruby>'


def _print_block(entry: Entry, short: Optional[str], next_span: Optional[str]) -> str:
    if entry.short is None or entry.show_in_print is False:
        return ''
    if not entry.has_definition or short is None:
        raise InvariantViolationError(
            "print tooltip without a definition", term=entry.main_form
        )

    output = f'<span class="glossed-print"> ({short})'
    if is_first_punctuation(next_span) is not True:
        output += ' '
    return output + '</span>'


def _tooltip_block(
    entry: Entry,
    short: Optional[str],
    glossary: Glossary,
    localizer: ILocalizer
) -> str:
    output = '<span class="glossed-tooltip">'
    entry_url = glossary.entry_url(entry)
    if entry_url is not None:
        if short is not None:
            label = localizer.lookup(glossary.lang, READ_MORE_KEY)
            output += f'{short} <a href="{entry_url}">{label}</a>'
        else:
            label = localizer.lookup(glossary.lang, GO_TO_GLOSSARY_KEY)
            output += f'<a href="{entry_url}">{label}</a>'
    return output + '</span>'


def render_gloss(
    surface_form: str,
    glossary: Glossary,
    next_span: Optional[str],
    localizer: ILocalizer
) -> str:
    """
    Build the annotated markup for one matched span.

    Args:
        surface_form: The matched term or variant, verbatim
        glossary: Compiled glossary holding the entry
        next_span: The span following the match, None at end of text
        localizer: Source of the "read more" / "go to glossary" labels

    Raises:
        TermLookupError: If ``surface_form`` has no entry
        InvariantViolationError: If a print block has no backing definition
    """
    entry = glossary.lookup(surface_form)
    term = entry.display_text(surface_form)
    short = short_form(entry)

    output = _ruby_node(entry, _core_node(entry, term))
    if not entry.has_definition:
        return output

    output += _print_block(entry, short, next_span)
    output += _tooltip_block(entry, short, glossary, localizer)
    return f'<span class="glossed-block">{output}</span>'
