from diccionario.models.enums import Language, SkillLevel
from diccionario.seeders.catalogs import (
    CSS_TERMS,
    CURATED_TERMS,
    css_entry_to_raw,
    expected_term_keys,
    load_merged_catalog,
    raw_catalogs,
)
from diccionario.services.dictionary_seed import RawTermInput, normalize, term_key


def test_every_catalog_entry_normalizes():
    for catalog in raw_catalogs():
        for raw in catalog:
            record = normalize(raw)
            assert record.slug
            assert len(record.use_cases) == 3


def test_merged_catalog_has_one_record_per_key():
    merged = load_merged_catalog()
    keys = [record.key for record in merged]

    assert len(keys) == len(set(keys))
    assert set(keys) == expected_term_keys()


def test_merged_catalog_returns_fresh_list():
    first = load_merged_catalog()
    first.clear()
    assert load_merged_catalog()


def test_curated_catalog_keeps_authoring_order():
    merged_terms = [record.term for record in load_merged_catalog()]
    curated_terms = [entry['term'] for entry in CURATED_TERMS]

    assert merged_terms[:len(curated_terms)] == curated_terms


def test_css_entries_become_beginner_css_terms():
    entry = CSS_TERMS[0]
    record = normalize(RawTermInput.from_mapping(css_entry_to_raw(entry)))

    assert record.category.value == 'frontend'
    assert 'css' in record.tags
    assert record.variants[0].language is Language.CSS
    assert record.variants[0].level is SkillLevel.BEGINNER
    assert record.examples[0].title_en == entry['example']['title']


def test_expected_keys_are_lowercase():
    assert all(key == term_key(key) for key in expected_term_keys())


def test_catalogs_carry_every_authored_entry():
    curated, css = raw_catalogs()

    assert len(curated) == 25
    assert len(css) == 105
    assert len(load_merged_catalog()) == len(expected_term_keys()) == 130


def test_curated_catalog_includes_html_elements():
    curated_terms = {entry['term'] for entry in CURATED_TERMS}

    assert {'html', 'head', 'body', 'slot'} <= curated_terms


def test_html_terms_get_html_variants():
    by_key = {record.key: record for record in load_merged_catalog()}

    for key in ('html', 'meta', 'template', 'slot'):
        record = by_key[key]
        assert record.variants[0].language is Language.HTML
        assert 'html' in record.tags
        assert len(record.examples) == 2


def test_link_notes_keep_literal_quotes():
    link = next(entry for entry in CURATED_TERMS if entry['term'] == 'link')

    assert 'rel="stylesheet"' in link['example']['note_en']
