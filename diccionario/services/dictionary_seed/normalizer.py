from __future__ import annotations

import re
from typing import Optional, Tuple

from ...models.enums import Category, Difficulty, Language, SkillLevel
from . import templates
from .errors import MalformedCatalogEntry
from .types import (
    CodeExample,
    ExerciseRecord,
    ExerciseSolution,
    FaqRecord,
    NormalizedTerm,
    RawTermInput,
    TermVariantRecord,
    UseCaseRecord,
)

_NON_SLUG_RUN = re.compile(r"[^a-z0-9]+")
UTILITY_CLASS_TAG = "tailwind"


def to_slug(value: str) -> str:
    """Lowercase, collapse every non ``[a-z0-9]`` run into one hyphen, trim hyphens."""
    return _NON_SLUG_RUN.sub("-", value.lower()).strip("-")


def normalize(raw: RawTermInput) -> NormalizedTerm:
    """Expand a catalog record into a fully populated term with its child records."""
    term = (raw.term or "").strip()
    if not term:
        raise MalformedCatalogEntry("Catalog entry has an empty term", term=raw.term)
    category = _resolve_category(raw)
    language = _resolve_language(raw, category)

    meaning_es = templates.meaning_es(term, raw.description_es)
    meaning_en = raw.description_en or templates.meaning_en(term, raw.translation)
    what_es = raw.what_es or templates.WHAT_ES[category](raw.description_es)
    what_en = raw.what_en or templates.WHAT_EN[category](raw.description_es)
    how_es = raw.how_es or templates.HOW_ES[category](term)
    how_en = raw.how_en or templates.HOW_EN[category](term)

    exercise_code = (raw.exercise_example or raw.example).code

    return NormalizedTerm(
        term=term,
        translation=raw.translation,
        category=category,
        slug=to_slug(term),
        title_es=raw.translation or term,
        title_en=term,
        meaning_es=meaning_es,
        meaning_en=meaning_en,
        what_es=what_es,
        what_en=what_en,
        how_es=how_es,
        how_en=how_en,
        aliases=tuple(raw.aliases),
        tags=tuple(raw.tags),
        examples=_examples(raw),
        variants=(
            TermVariantRecord(
                language=language,
                code=raw.example.code,
                notes=raw.example.note_es or raw.example.note_en,
                level=SkillLevel.BEGINNER if language is Language.CSS else SkillLevel.INTERMEDIATE,
            ),
        ),
        use_cases=_use_cases(term, category, what_es, what_en),
        faqs=(
            FaqRecord(
                question_es=templates.faq_question_es(term),
                question_en=templates.faq_question_en(term),
                answer_es=f"{meaning_es} {how_es}",
                answer_en=f"{meaning_en} {how_en}",
                snippet=raw.example.code,
                category=raw.translation,
                how_to_explain=templates.FAQ_HOW_TO_EXPLAIN,
            ),
        ),
        exercises=(
            ExerciseRecord(
                difficulty=Difficulty.MEDIUM,
                solutions=(
                    ExerciseSolution(
                        language=language,
                        code=exercise_code,
                        explain_es=how_es,
                        explain_en=how_en,
                    ),
                ),
                **templates.exercise_texts(term),
            ),
        ),
    )


def _resolve_category(raw: RawTermInput) -> Category:
    try:
        return Category(raw.category)
    except ValueError:
        raise MalformedCatalogEntry(
            f"Unknown category {raw.category!r} for term {raw.term!r}", term=raw.term
        ) from None


def _resolve_language(raw: RawTermInput, category: Category) -> Language:
    if not raw.language_override:
        return templates.DEFAULT_LANGUAGE[category]
    try:
        return Language(raw.language_override)
    except ValueError:
        raise MalformedCatalogEntry(
            f"Unknown language {raw.language_override!r} for term {raw.term!r}", term=raw.term
        ) from None


def _examples(raw: RawTermInput) -> Tuple[CodeExample, ...]:
    is_utility_term = any(tag.lower() == UTILITY_CLASS_TAG for tag in raw.tags)
    second: Optional[CodeExample] = raw.exercise_example if is_utility_term else raw.second_example
    return tuple(example for example in (raw.example, second) if example is not None)


def _use_cases(term: str, category: Category, what_es: str, what_en: str) -> Tuple[UseCaseRecord, ...]:
    records = []
    for context, text in templates.use_case_templates(term, category).items():
        records.append(
            UseCaseRecord(
                context=context,
                summary_es=text["summary_es"] or what_es,
                summary_en=text["summary_en"] or what_en,
                steps_es=text["steps_es"],
                steps_en=text["steps_en"],
                tips_es=text["tips_es"],
                tips_en=text["tips_en"],
            )
        )
    return tuple(records)
