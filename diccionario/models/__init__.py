from ..extensions import db
from .enums import (
    Category,
    ChildrenPolicy,
    Difficulty,
    Language,
    ReviewStatus,
    SkillLevel,
    UseCaseContext,
)
from .term import Exercise, Faq, Term, TermVariant, UseCase
from .term_stats import TermStats

__all__ = [
    'db',
    'Category',
    'ChildrenPolicy',
    'Difficulty',
    'Language',
    'ReviewStatus',
    'SkillLevel',
    'UseCaseContext',
    'Term',
    'TermVariant',
    'UseCase',
    'Faq',
    'Exercise',
    'TermStats',
]
