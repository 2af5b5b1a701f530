"""End-to-end annotation tests."""
import pytest

from autogloss.annotator import Annotator, annotate
from autogloss.glossary import GlossaryCompiler


GLAAD_RUBY = '<ruby>GLAAD<rp>(</rp><rt>/ɡlæd/</rt><rp>)</rp></ruby>'


@pytest.fixture
def glaad_glossary():
    return GlossaryCompiler().compile_language('en', {'entries': {'GLAAD': {'ruby': '/ɡlæd/'}}})


@pytest.fixture
def annotator(catalog):
    return Annotator(catalog)


def test_single_term_with_ruby(glaad_glossary):
    assert annotate('GLAAD', glaad_glossary) == GLAAD_RUBY


def test_comment_is_skipped(glaad_glossary, annotator):
    text = '<!-- GLAAD is great --> GLAAD'
    assert annotator.annotate(text, glaad_glossary) == '<!-- GLAAD is great --> ' + GLAAD_RUBY


def test_unclosed_comment_hides_rest(glaad_glossary, annotator):
    text = 'GLAAD <!-- GLAAD'
    assert annotator.annotate(text, glaad_glossary) == GLAAD_RUBY + ' <!-- GLAAD'


def test_several_comments(glaad_glossary, annotator):
    text = '<!-- GLAAD --> GLAAD <!-- GLAAD -->'
    assert annotator.annotate(text, glaad_glossary) == (
        '<!-- GLAAD --> ' + GLAAD_RUBY + ' <!-- GLAAD -->'
    )


@pytest.mark.parametrize('text', [
    '',
    'Nothing to see here.',
    'glaad GLAADs xGLAAD',
    '<p class="note">lowercase amab</p>',
])
def test_unmatched_text_unchanged(en_glossary, annotator, text):
    assert annotator.annotate(text, en_glossary) == text


def test_attribute_values_are_matched(en_glossary, annotator):
    # only comments are skipped; other markup is not parsed
    result = annotator.annotate('<p class="AMAB">x</p>', en_glossary)
    assert result != '<p class="AMAB">x</p>'


def test_case_sensitive(en_glossary, annotator):
    assert annotator.annotate('amab Amab', en_glossary) == 'amab Amab'


def test_next_span_drives_print_spacing(en_glossary, annotator):
    result = annotator.annotate('AMAB. AMAB people', en_glossary)
    assert result.count('<span class="glossed-print"> (assigned male at birth)</span>') == 1
    assert result.count('<span class="glossed-print"> (assigned male at birth) </span>') == 1
    assert result.endswith('</span> people')


def test_variant_in_sentence(en_glossary, annotator):
    result = annotator.annotate('Two transmen arrived.', en_glossary)
    assert result.startswith('Two <span class="glossed-block">')
    assert '<a href="#">trans·men</a>' in result
    assert result.endswith('</span> arrived.')


def test_multi_word_variant_never_matches(en_glossary, annotator):
    assert annotator.annotate('a trans man', en_glossary) == 'a trans man'


def test_stats(en_glossary, annotator):
    result = annotator.annotate_with_stats('AMAB, GLAAD and AMAB <!-- TeX -->', en_glossary)
    assert result.replacements == 3
    assert result.terms_applied == ['AMAB', 'GLAAD']
    assert result.text == annotator.annotate('AMAB, GLAAD and AMAB <!-- TeX -->', en_glossary)


def test_input_not_mutated(en_glossary, annotator):
    text = 'AMAB'
    annotator.annotate(text, en_glossary)
    assert text == 'AMAB'


def test_default_localizer(en_glossary):
    assert 'Read more</a>' in Annotator().annotate('AMAB', en_glossary)
