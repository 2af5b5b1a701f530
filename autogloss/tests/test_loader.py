"""Tests for glossary source discovery and loading."""
import pytest

from autogloss.core.exceptions import ConfigurationError, DuplicateTermError, GlossaryReadError
from autogloss.glossary import GlossaryLoader, load_glossaries


def test_discover(glossary_tree):
    paths = GlossaryLoader(glossary_tree).discover()
    assert [p.parent.name for p in paths] == ['en', 'fr']


def test_load_keys_by_directory(glossary_tree, en_source):
    sources = GlossaryLoader(glossary_tree).load()
    assert set(sources) == {'en', 'fr'}
    assert sources['en'] == en_source


def test_load_glossaries(glossary_tree):
    glossaries = load_glossaries(glossary_tree, max_workers=2)
    assert glossaries['en'].entries == ('AMAB', 'GLAAD', 'LaTeX', 'TeX', 'transman')
    assert glossaries['fr'].terms == ('AMAB', 'AMABs')
    assert glossaries['fr'].lookup('AMABs').short == 'assigné homme à la naissance'


def test_load_selected_language(glossary_tree):
    assert list(load_glossaries(glossary_tree, languages=['fr'])) == ['fr']


def test_unknown_language(glossary_tree):
    with pytest.raises(ConfigurationError):
        load_glossaries(glossary_tree, languages=['de'])


def test_missing_root(temp_dir):
    with pytest.raises(ConfigurationError):
        GlossaryLoader(temp_dir / 'nope').load()


def test_empty_root(temp_dir):
    assert GlossaryLoader(temp_dir).load() == {}


def test_other_files_ignored(glossary_tree):
    (glossary_tree / 'en' / '_glossary.txt').write_text('not a glossary', encoding='utf-8')
    (glossary_tree / 'en' / 'notes.yaml').write_text('a: 1', encoding='utf-8')
    assert len(GlossaryLoader(glossary_tree).discover()) == 2


def test_two_sources_for_one_language(glossary_tree):
    (glossary_tree / 'en' / '_glossary.json').write_text('{"entries": {}}', encoding='utf-8')
    with pytest.raises(ConfigurationError):
        GlossaryLoader(glossary_tree).load()


def test_invalid_yaml(temp_dir):
    path = temp_dir / '_glossary.yaml'
    path.write_text('entries: [unclosed', encoding='utf-8')
    with pytest.raises(GlossaryReadError) as exc:
        GlossaryLoader.load_file(path)
    assert exc.value.path == str(path)
    assert exc.value.__cause__ is not None


def test_non_mapping_document(temp_dir):
    path = temp_dir / '_glossary.json'
    path.write_text('[1, 2]', encoding='utf-8')
    with pytest.raises(GlossaryReadError):
        GlossaryLoader.load_file(path)


def test_empty_document(temp_dir):
    path = temp_dir / '_glossary.yml'
    path.write_text('', encoding='utf-8')
    assert GlossaryLoader.load_file(path) == {}


def test_unsupported_suffix(temp_dir):
    with pytest.raises(GlossaryReadError):
        GlossaryLoader.load_file(temp_dir / '_glossary.js')


def test_duplicate_in_file(temp_dir):
    (temp_dir / 'en').mkdir()
    (temp_dir / 'en' / '_glossary.yaml').write_text(
        'entries:\n  AMAB:\n    variants: [AFAB]\n  AFAB: {}\n', encoding='utf-8'
    )
    with pytest.raises(DuplicateTermError) as exc:
        load_glossaries(temp_dir)
    assert exc.value.term == 'AFAB'
