import pytest

from diccionario.models.enums import Category, Difficulty, Language, SkillLevel, UseCaseContext
from diccionario.services.dictionary_seed import (
    MalformedCatalogEntry,
    RawTermInput,
    normalize,
    to_slug,
)


def _raw(**overrides):
    data = {
        'term': 'fetch',
        'translation': 'traer datos',
        'category': 'frontend',
        'description_es': 'una API del navegador para pedir datos',
        'example': {'title_es': 'GET', 'title_en': 'GET', 'code': 'fetch("/api")', 'note_es': 'nota'},
    }
    data.update(overrides)
    return RawTermInput.from_mapping(data)


@pytest.mark.parametrize('value,expected', [
    ('fetch', 'fetch'),
    ('useEffect', 'useeffect'),
    ('bg-gradient-to-r', 'bg-gradient-to-r'),
    ('CI/CD', 'ci-cd'),
    ('  --Hello,  World!--  ', 'hello-world'),
    ('aria-label', 'aria-label'),
    ('!!!', ''),
])
def test_to_slug_collapses_non_alphanumeric_runs(value, expected):
    assert to_slug(value) == expected


def test_slug_has_no_edge_or_double_hyphens():
    slug = to_slug('__Async / Await__ (ES2017)')
    assert slug == 'async-await-es2017'
    assert not slug.startswith('-') and not slug.endswith('-')
    assert '--' not in slug


def test_normalize_populates_every_derived_collection():
    record = normalize(_raw())

    assert record.slug == 'fetch'
    assert record.category is Category.FRONTEND
    assert record.title_es == 'traer datos'
    assert record.title_en == 'fetch'
    assert [u.context for u in record.use_cases] == [
        UseCaseContext.PROJECT,
        UseCaseContext.INTERVIEW,
        UseCaseContext.BUG,
    ]
    assert len(record.faqs) == 1
    assert len(record.exercises) == 1
    assert len(record.exercises[0].solutions) == 1
    assert len(record.variants) == 1


def test_normalize_synthesizes_bilingual_text_from_templates():
    record = normalize(_raw())

    assert record.meaning_es == 'En programación "fetch" se refiere a una API del navegador para pedir datos.'
    assert record.meaning_en == 'In programming, "fetch" refers to traer datos.'
    assert record.what_es == (
        'Lo empleamos para una API del navegador para pedir datos dentro de la capa visual y de interacción.'
    )
    assert record.what_en == 'We use it for the UI layer.'
    assert 'React/Next' in record.how_es
    assert record.how_en.startswith('Use "fetch"')


def test_meaning_en_without_translation_uses_generic_sentence():
    record = normalize(_raw(translation=''))
    assert record.meaning_en == 'In programming, "fetch" is a common concept used across the stack.'
    assert record.title_es == 'fetch'


def test_explicit_text_overrides_templates():
    record = normalize(_raw(
        description_en='Native HTTP client.',
        what_es='qué', what_en='what', how_es='cómo', how_en='how',
    ))
    assert record.meaning_en == 'Native HTTP client.'
    assert (record.what_es, record.what_en, record.how_es, record.how_en) == ('qué', 'what', 'cómo', 'how')


def test_general_category_how_text():
    record = normalize(_raw(term='naming', category='general'))
    assert record.how_es == (
        'Documenta y reutiliza "naming" como parte de tus utilidades para que todo el equipo comparta el mismo lenguaje.'
    )


def test_tailwind_tag_uses_exercise_snippet_as_second_example():
    record = normalize(_raw(
        term='flex-col',
        tags=['Tailwind', 'layout'],
        example={'code': 'A'},
        exercise_example={'code': 'B'},
        second_example={'code': 'C'},
    ))
    assert [example.code for example in record.examples] == ['A', 'B']


def test_non_utility_term_uses_second_example():
    record = normalize(_raw(
        example={'code': 'A'},
        exercise_example={'code': 'B'},
        second_example={'code': 'C'},
    ))
    assert [example.code for example in record.examples] == ['A', 'C']


def test_missing_second_example_leaves_single_example():
    record = normalize(_raw())
    assert [example.code for example in record.examples] == ['fetch("/api")']


def test_variant_level_and_language_follow_category_defaults():
    frontend = normalize(_raw())
    assert frontend.variants[0].language is Language.TS
    assert frontend.variants[0].level is SkillLevel.INTERMEDIATE
    assert frontend.variants[0].notes == 'nota'

    devops = normalize(_raw(term='Docker', category='devops'))
    assert devops.variants[0].language is Language.GO


def test_css_language_override_yields_beginner_variant():
    record = normalize(_raw(term='align-items', language_override='css'))
    assert record.variants[0].language is Language.CSS
    assert record.variants[0].level is SkillLevel.BEGINNER
    assert record.exercises[0].solutions[0].language is Language.CSS


def test_faq_embeds_example_code_and_concatenated_answer():
    record = normalize(_raw())
    faq = record.faqs[0]
    assert faq.snippet == 'fetch("/api")'
    assert faq.answer_es == f'{record.meaning_es} {record.how_es}'
    assert faq.answer_en == f'{record.meaning_en} {record.how_en}'
    assert faq.category == 'traer datos'
    assert faq.question_en == 'How do you explain fetch during an interview?'


def test_exercise_prefers_exercise_example_code():
    with_exercise = normalize(_raw(exercise_example={'code': 'B'}))
    without_exercise = normalize(_raw())

    assert with_exercise.exercises[0].solutions[0].code == 'B'
    assert without_exercise.exercises[0].solutions[0].code == 'fetch("/api")'
    assert with_exercise.exercises[0].difficulty is Difficulty.MEDIUM
    assert with_exercise.exercises[0].prompt_en == 'Implement "fetch" in a practical snippet and explain each step.'


def test_empty_term_is_rejected():
    with pytest.raises(MalformedCatalogEntry):
        normalize(_raw(term='   '))


def test_unknown_category_is_rejected():
    with pytest.raises(MalformedCatalogEntry) as excinfo:
        normalize(_raw(category='mobile'))
    assert excinfo.value.term == 'fetch'


def test_unknown_language_override_is_rejected():
    with pytest.raises(MalformedCatalogEntry):
        normalize(_raw(language_override='cobol'))


def test_raw_input_requires_core_keys():
    with pytest.raises(MalformedCatalogEntry) as excinfo:
        RawTermInput.from_mapping({'term': 'fetch', 'category': 'frontend'})
    assert 'translation' in str(excinfo.value)


def test_normalize_is_deterministic():
    assert normalize(_raw(tags=['http'])) == normalize(_raw(tags=['http']))
