"""Persistence boundary for the seeding pipeline.

``TermRepository`` is the narrow interface the batch runner and coordinator
consume; ``SqlAlchemyTermRepository`` backs it with the Flask-SQLAlchemy
session and the ``Term`` model family.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, Set, Tuple

from sqlalchemy.exc import SQLAlchemyError

from ...extensions import db
from ...models import Exercise, Faq, Term, TermStats, TermVariant, UseCase
from ...models.enums import ChildrenPolicy, ReviewStatus
from .errors import PersistenceFailure
from .types import (
    ExerciseRecord,
    FaqRecord,
    MergedTerm,
    TermVariantRecord,
    UseCaseRecord,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TermChildren:
    variants: Tuple[TermVariantRecord, ...] = ()
    use_cases: Tuple[UseCaseRecord, ...] = ()
    faqs: Tuple[FaqRecord, ...] = ()
    exercises: Tuple[ExerciseRecord, ...] = ()

    @classmethod
    def from_term(cls, merged: MergedTerm) -> "TermChildren":
        return cls(
            variants=merged.variants,
            use_cases=merged.use_cases,
            faqs=merged.faqs,
            exercises=merged.exercises,
        )


class TermRepository(Protocol):
    def count_terms(self) -> int: ...

    def list_term_names(self) -> Set[str]: ...

    def upsert_term(self, key: str, fields: Dict[str, Any], children: Optional[TermChildren] = None) -> int: ...

    def ensure_stats_row(self, term_id: int) -> None: ...


def scalar_fields(merged: MergedTerm) -> Dict[str, Any]:
    """Column values written on both insert and update."""
    return {
        'translation': merged.translation,
        'slug': merged.slug,
        'title_es': merged.title_es,
        'title_en': merged.title_en,
        'aliases': list(merged.aliases),
        'tags': list(merged.tags),
        'category': merged.category.value,
        'meaning': merged.meaning_es,
        'meaning_es': merged.meaning_es,
        'meaning_en': merged.meaning_en,
        'what': merged.what_es or merged.what_en or '',
        'what_es': merged.what_es,
        'what_en': merged.what_en,
        'how': merged.how_es,
        'how_es': merged.how_es,
        'how_en': merged.how_en,
        'examples': [example.to_dict() for example in merged.examples],
        'status': ReviewStatus.APPROVED.value,
    }


def _paired_steps(steps_es: Tuple[str, ...], steps_en: Tuple[str, ...]) -> list:
    pairs = []
    for index, step_es in enumerate(steps_es):
        if index < len(steps_en):
            step_en = steps_en[index]
        else:
            step_en = steps_en[-1] if steps_en else step_es
        pairs.append({'es': step_es, 'en': step_en})
    return pairs


def build_child_rows(children: TermChildren) -> Dict[str, list]:
    approved = ReviewStatus.APPROVED.value
    return {
        'variants': [
            TermVariant(
                language=v.language.value,
                snippet=v.code,
                notes=v.notes,
                level=v.level.value,
                status=approved,
            )
            for v in children.variants
        ],
        'use_cases': [
            UseCase(
                context=u.context.value,
                summary=f'{u.summary_es} | {u.summary_en}',
                steps=_paired_steps(u.steps_es, u.steps_en),
                tips=f'{u.tips_es} | {u.tips_en}',
                status=approved,
            )
            for u in children.use_cases
        ],
        'faqs': [
            Faq(
                question_es=f.question_es,
                question_en=f.question_en,
                answer_es=f.answer_es,
                answer_en=f.answer_en,
                snippet=f.snippet,
                category=f.category,
                how_to_explain=f.how_to_explain,
                status=approved,
            )
            for f in children.faqs
        ],
        'exercises': [
            Exercise(
                title_es=e.title_es,
                title_en=e.title_en,
                prompt_es=e.prompt_es,
                prompt_en=e.prompt_en,
                difficulty=e.difficulty.value,
                solutions=[solution.to_dict() for solution in e.solutions],
                status=approved,
            )
            for e in children.exercises
        ],
    }


class SqlAlchemyTermRepository:
    """Term store backed by the application's SQLAlchemy session."""

    def __init__(self, session=None, children_policy: ChildrenPolicy = ChildrenPolicy.PRESERVE):
        self._session = session
        self.children_policy = ChildrenPolicy(children_policy)

    @property
    def session(self):
        return self._session if self._session is not None else db.session

    def count_terms(self) -> int:
        try:
            return self.session.query(Term.id).count()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise PersistenceFailure(f'Unable to count terms: {exc}') from exc

    def list_term_names(self) -> Set[str]:
        try:
            return {row[0] for row in self.session.query(Term.term).all()}
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise PersistenceFailure(f'Unable to list term names: {exc}') from exc

    def upsert_term(self, key: str, fields: Dict[str, Any], children: Optional[TermChildren] = None) -> int:
        session = self.session
        try:
            term = session.query(Term).filter_by(term=key).first()
            if term is None:
                term = Term(term=key, **fields)
                if children is not None:
                    self._attach_children(term, children)
                session.add(term)
            else:
                for column, value in fields.items():
                    setattr(term, column, value)
                if children is not None and self.children_policy is ChildrenPolicy.REPLACE:
                    term.variants.clear()
                    term.use_cases.clear()
                    term.faqs.clear()
                    term.exercises.clear()
                    session.flush()
                    self._attach_children(term, children)
            session.commit()
            return term.id
        except SQLAlchemyError as exc:
            session.rollback()
            raise PersistenceFailure(f'Unable to upsert term {key!r}: {exc}', term=key) from exc

    def ensure_stats_row(self, term_id: int) -> None:
        session = self.session
        try:
            if session.query(TermStats.id).filter_by(term_id=term_id).first() is None:
                session.add(TermStats(term_id=term_id, views=0, context_hits={}, language_hits={}))
                session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            raise PersistenceFailure(f'Unable to ensure stats row for term id {term_id}: {exc}') from exc

    @staticmethod
    def _attach_children(term: Term, children: TermChildren) -> None:
        rows = build_child_rows(children)
        term.variants.extend(rows['variants'])
        term.use_cases.extend(rows['use_cases'])
        term.faqs.extend(rows['faqs'])
        term.exercises.extend(rows['exercises'])
