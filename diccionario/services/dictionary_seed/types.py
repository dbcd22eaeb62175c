"""Plain data records flowing through the dictionary seeding pipeline.

Catalog literals become ``RawTermInput`` records, the normalizer expands each
into a ``NormalizedTerm`` and the merger folds duplicates into ``MergedTerm``
records (same shape). ``SeedBatchResult`` is the report handed back by one
batch invocation.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Mapping, Optional, Tuple

from ...models.enums import Category, Difficulty, Language, SkillLevel, UseCaseContext
from .errors import MalformedCatalogEntry

_REQUIRED_RAW_KEYS = ("term", "translation", "category", "description_es", "example")


def term_key(term: Optional[str]) -> str:
    """Case-insensitive dedup key for a term name."""
    return (term or "").strip().lower()


@dataclass(frozen=True)
class CodeExample:
    code: str
    title_es: str = ""
    title_en: str = ""
    note_es: Optional[str] = None
    note_en: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CodeExample":
        return cls(
            code=data.get("code", ""),
            title_es=data.get("title_es", "") or "",
            title_en=data.get("title_en", "") or "",
            note_es=data.get("note_es"),
            note_en=data.get("note_en"),
        )

    def to_dict(self) -> dict:
        payload = {"title_es": self.title_es, "title_en": self.title_en, "code": self.code}
        if self.note_es:
            payload["note_es"] = self.note_es
        if self.note_en:
            payload["note_en"] = self.note_en
        return payload


@dataclass(frozen=True)
class RawTermInput:
    term: str
    translation: str
    category: str
    description_es: str
    example: CodeExample
    description_en: Optional[str] = None
    aliases: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()
    exercise_example: Optional[CodeExample] = None
    second_example: Optional[CodeExample] = None
    what_es: Optional[str] = None
    what_en: Optional[str] = None
    how_es: Optional[str] = None
    how_en: Optional[str] = None
    language_override: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RawTermInput":
        missing = [key for key in _REQUIRED_RAW_KEYS if key not in data]
        if missing:
            raise MalformedCatalogEntry(
                f"Catalog entry {data.get('term')!r} is missing keys: {', '.join(missing)}",
                term=data.get("term"),
            )

        def _example(key: str) -> Optional[CodeExample]:
            value = data.get(key)
            return CodeExample.from_mapping(value) if value else None

        return cls(
            term=data["term"],
            translation=data["translation"] or "",
            category=data["category"],
            description_es=data["description_es"],
            description_en=data.get("description_en"),
            example=CodeExample.from_mapping(data["example"]),
            aliases=tuple(data.get("aliases") or ()),
            tags=tuple(data.get("tags") or ()),
            exercise_example=_example("exercise_example"),
            second_example=_example("second_example"),
            what_es=data.get("what_es"),
            what_en=data.get("what_en"),
            how_es=data.get("how_es"),
            how_en=data.get("how_en"),
            language_override=data.get("language_override"),
        )


@dataclass(frozen=True)
class TermVariantRecord:
    language: Language
    code: str
    notes: Optional[str]
    level: SkillLevel


@dataclass(frozen=True)
class UseCaseRecord:
    context: UseCaseContext
    summary_es: str
    summary_en: str
    steps_es: Tuple[str, ...]
    steps_en: Tuple[str, ...]
    tips_es: str
    tips_en: str


@dataclass(frozen=True)
class FaqRecord:
    question_es: str
    question_en: str
    answer_es: str
    answer_en: str
    snippet: str
    category: str
    how_to_explain: str


@dataclass(frozen=True)
class ExerciseSolution:
    language: Language
    code: str
    explain_es: str
    explain_en: str

    def to_dict(self) -> dict:
        return {
            "language": self.language.value,
            "code": self.code,
            "explain_es": self.explain_es,
            "explain_en": self.explain_en,
        }


@dataclass(frozen=True)
class ExerciseRecord:
    title_es: str
    title_en: str
    prompt_es: str
    prompt_en: str
    difficulty: Difficulty
    solutions: Tuple[ExerciseSolution, ...]


@dataclass(frozen=True)
class NormalizedTerm:
    term: str
    translation: str
    category: Category
    slug: str
    title_es: str
    title_en: str
    meaning_es: str
    meaning_en: str
    what_es: str
    what_en: str
    how_es: str
    how_en: str
    aliases: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()
    examples: Tuple[CodeExample, ...] = ()
    variants: Tuple[TermVariantRecord, ...] = ()
    use_cases: Tuple[UseCaseRecord, ...] = ()
    faqs: Tuple[FaqRecord, ...] = ()
    exercises: Tuple[ExerciseRecord, ...] = ()

    @property
    def key(self) -> str:
        return term_key(self.term)


# Merged records carry exactly the normalized shape.
MergedTerm = NormalizedTerm


@dataclass(frozen=True)
class SeedBatchResult:
    processed: int = 0
    remaining: int = 0
    total_missing: int = 0
    completed: bool = True
    batch_limit_reached: bool = False
    time_budget_reached: bool = False
    failed_stats: Tuple[str, ...] = field(default=(), compare=False)

    def to_dict(self) -> dict:
        payload = asdict(self)
        payload["failed_stats"] = list(self.failed_stats)
        return payload
