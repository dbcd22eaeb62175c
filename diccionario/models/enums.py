from enum import Enum


class Category(str, Enum):
    FRONTEND = "frontend"
    BACKEND = "backend"
    DATABASE = "database"
    DEVOPS = "devops"
    GENERAL = "general"


class Language(str, Enum):
    TS = "ts"
    JS = "js"
    PY = "py"
    GO = "go"
    CSS = "css"
    HTML = "html"


class SkillLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class UseCaseContext(str, Enum):
    PROJECT = "project"
    INTERVIEW = "interview"
    BUG = "bug"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class ReviewStatus(str, Enum):
    PENDING = "pending"
    IN_REVIEW = "in_review"
    APPROVED = "approved"
    REJECTED = "rejected"


class ChildrenPolicy(str, Enum):
    """What an update does with a term's variants, use cases, FAQs and exercises."""

    PRESERVE = "preserve"
    REPLACE = "replace"
