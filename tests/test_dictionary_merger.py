import dataclasses

from diccionario.services.dictionary_seed import RawTermInput, merge, normalize


def _term(term, **overrides):
    data = {
        'term': term,
        'translation': f'{term} es',
        'category': 'frontend',
        'description_es': f'descripción de {term}',
        'example': {'code': f'{term}()'},
    }
    data.update(overrides)
    return normalize(RawTermInput.from_mapping(data))


def test_duplicate_term_unions_tags_and_aliases():
    catalog_a = [_term('useState', tags=['react'])]
    catalog_b = [_term('useState', tags=['hooks'], aliases=['hook state'])]

    [merged] = merge([catalog_a, catalog_b])

    assert set(merged.tags) == {'react', 'hooks'}
    assert set(merged.aliases) == {'hook state'}


def test_aliases_union_is_order_preserving_and_deduplicated():
    catalog_a = [_term('fetch', aliases=['x', 'shared'])]
    catalog_b = [_term('Fetch', aliases=['shared', 'y', ''])]

    [merged] = merge([catalog_a, catalog_b])

    assert merged.aliases == ('x', 'shared', 'y')


def test_later_catalog_wins_on_scalar_text():
    catalog_a = [_term('fetch', description_en='old meaning', how_en='old how')]
    catalog_b = [_term('FETCH', description_en='new meaning', translation='nuevo')]

    [merged] = merge([catalog_a, catalog_b])

    assert merged.meaning_en == 'new meaning'
    assert merged.translation == 'nuevo'
    assert merged.how_en.startswith('Use "FETCH"')
    assert merged.slug == 'fetch'


def test_examples_replaced_only_by_non_empty_incoming_set():
    existing = _term('grid', second_example={'code': 'second'})
    emptied = dataclasses.replace(existing, examples=())
    incoming = _term('grid', example={'code': 'newer'})

    [kept] = merge([[existing], [emptied]])
    assert [e.code for e in kept.examples] == ['grid()', 'second']

    [replaced] = merge([[existing], [incoming]])
    assert [e.code for e in replaced.examples] == ['newer']


def test_child_collections_are_concatenated():
    [merged] = merge([[_term('debounce')], [_term('Debounce')]])

    assert len(merged.use_cases) == 6
    assert len(merged.faqs) == 2
    assert len(merged.exercises) == 2
    assert len(merged.variants) == 2


def test_output_keeps_first_appearance_order():
    catalog_a = [_term('fetch'), _term('useState')]
    catalog_b = [_term('grid'), _term('FETCH')]

    merged = merge([catalog_a, catalog_b])

    assert [record.term for record in merged] == ['FETCH', 'useState', 'grid']


def test_merge_is_idempotent_over_its_own_output():
    catalogs = [[_term('fetch', tags=['http'])], [_term('fetch', tags=['api']), _term('grid')]]

    once = merge(catalogs)
    twice = merge([once])

    assert twice == once


def test_empty_catalogs_merge_to_empty_list():
    assert merge([]) == []
    assert merge([[], []]) == []


def test_merge_with_empty_catalog_is_identity():
    catalog = [
        _term('fetch', aliases=['fetch API'], tags=['http']),
        _term('grid', tags=['css', 'layout']),
        _term('useState', aliases=['state hook']),
    ]

    assert merge([catalog, []]) == catalog
    assert merge([[], catalog]) == catalog
    assert merge([catalog]) == catalog
