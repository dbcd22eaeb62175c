"""Category-keyed sentence templates used to synthesize bilingual term text."""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

from ...models.enums import Category, Language, UseCaseContext

TemplateFn = Callable[[str], str]

CONTEXT_ES: Mapping[Category, str] = MappingProxyType({
    Category.FRONTEND: "la capa visual y de interacción",
    Category.BACKEND: "las APIs, servicios y lógica de negocio",
    Category.DATABASE: "el modelado y las consultas de datos",
    Category.DEVOPS: "los pipelines, CLI y despliegues",
    Category.GENERAL: "todo el stack",
})

CONTEXT_EN: Mapping[Category, str] = MappingProxyType({
    Category.FRONTEND: "the UI layer",
    Category.BACKEND: "APIs, services, and business logic",
    Category.DATABASE: "data modeling and querying",
    Category.DEVOPS: "pipelines, CLIs, and deployments",
    Category.GENERAL: "the entire stack",
})

HOW_ES: Mapping[Category, TemplateFn] = MappingProxyType({
    Category.FRONTEND: lambda t: f'Implementa "{t}" dentro de tus componentes React/Next para mantener una UI coherente y accesible.',
    Category.BACKEND: lambda t: f'Incluye "{t}" en tus controladores o servicios Node/Nest garantizando reglas de negocio claras.',
    Category.DATABASE: lambda t: f'Modela "{t}" en tus esquemas SQL/Prisma y valida los datos antes de almacenarlos.',
    Category.DEVOPS: lambda t: f'Automatiza "{t}" con scripts, contenedores y pipelines de CI/CD para despliegues repetibles.',
    Category.GENERAL: lambda t: f'Documenta y reutiliza "{t}" como parte de tus utilidades para que todo el equipo comparta el mismo lenguaje.',
})

HOW_EN: Mapping[Category, TemplateFn] = MappingProxyType({
    Category.FRONTEND: lambda t: f'Use "{t}" across your React/Next components to keep the UI consistent and accessible.',
    Category.BACKEND: lambda t: f'Add "{t}" to your Node/Nest controllers or services to keep business rules explicit.',
    Category.DATABASE: lambda t: f'Model "{t}" in your SQL/Prisma schemas and validate the data before persisting it.',
    Category.DEVOPS: lambda t: f'Automate "{t}" through scripts, containers, and CI/CD pipelines for reliable deployments.',
    Category.GENERAL: lambda t: f'Document and reuse "{t}" as a shared utility so the team speaks the same language.',
})


def _what_es(category: Category) -> Callable[[str], str]:
    return lambda description: f"Lo empleamos para {description} dentro de {CONTEXT_ES[category]}."


def _what_en(category: Category) -> Callable[[str], str]:
    return lambda _description: f"We use it for {CONTEXT_EN[category]}."


# Keyed by category; each takes the Spanish description of the term.
WHAT_ES: Mapping[Category, Callable[[str], str]] = MappingProxyType({c: _what_es(c) for c in Category})
WHAT_EN: Mapping[Category, Callable[[str], str]] = MappingProxyType({c: _what_en(c) for c in Category})

DEFAULT_LANGUAGE: Mapping[Category, Language] = MappingProxyType({
    Category.FRONTEND: Language.TS,
    Category.BACKEND: Language.JS,
    Category.DATABASE: Language.PY,
    Category.DEVOPS: Language.GO,
    Category.GENERAL: Language.TS,
})


def meaning_es(term: str, description_es: str) -> str:
    return f'En programación "{term}" se refiere a {description_es}.'


def meaning_en(term: str, translation: str) -> str:
    if translation:
        return f'In programming, "{term}" refers to {translation}.'
    return f'In programming, "{term}" is a common concept used across the stack.'


def use_case_templates(term: str, category: Category) -> dict:
    """Bilingual summary/steps/tips for each of the three use-case contexts."""
    ctx_es = CONTEXT_ES[category]
    ctx_en = CONTEXT_EN[category]
    return {
        UseCaseContext.PROJECT: {
            "summary_es": f'Aplica "{term}" en {ctx_es} para destrabar un caso real.',
            "summary_en": f'Apply "{term}" in {ctx_en} to unblock a real scenario.',
            "steps_es": (
                f"Describe el problema dentro de {ctx_es}.",
                f'Explica cómo "{term}" lo resuelve.',
                "Comparte el impacto final.",
            ),
            "steps_en": (
                f"Describe the problem inside {ctx_en}.",
                f'Explain how "{term}" solves it.',
                "Share the outcome.",
            ),
            "tips_es": "Conecta el concepto con un proyecto o métrica real.",
            "tips_en": "Connect the concept with a real project or metric.",
        },
        UseCaseContext.INTERVIEW: {
            "summary_es": f'Explica "{term}" como si estuvieras frente a un líder técnico.',
            "summary_en": f'Explain "{term}" as if you were in front of a tech lead.',
            "steps_es": (
                f'Menciona qué resuelve "{term}".',
                "Ilustra un ejemplo concreto.",
                "Cierra con el impacto en negocio.",
            ),
            "steps_en": (
                f'Mention what "{term}" solves.',
                "Illustrate a concrete example.",
                "Close with the business impact.",
            ),
            "tips_es": "Usa analogías claras y evita jerga innecesaria.",
            "tips_en": "Use clear analogies and avoid unnecessary jargon.",
        },
        UseCaseContext.BUG: {
            "summary_es": f'Usa "{term}" para diagnosticar o prevenir bugs relacionados.',
            "summary_en": f'Use "{term}" to diagnose or prevent related bugs.',
            "steps_es": (
                "Identifica el síntoma o error.",
                f'Relaciona el bug con "{term}".',
                "Explica la solución aplicada.",
            ),
            "steps_en": (
                "Identify the symptom or error.",
                f'Relate the bug to "{term}".',
                "Explain the applied fix.",
            ),
            "tips_es": "Resalta logs o métricas relevantes.",
            "tips_en": "Highlight relevant logs or metrics.",
        },
    }


FAQ_HOW_TO_EXPLAIN = "Usa un ejemplo, enlaza con impacto real y ofrece métricas cuando sea posible."


def faq_question_es(term: str) -> str:
    return f"¿Cómo explicas {term} en una entrevista?"


def faq_question_en(term: str) -> str:
    return f"How do you explain {term} during an interview?"


def exercise_texts(term: str) -> dict:
    return {
        "title_es": f"Ejercicio {term}",
        "title_en": f"{term} challenge",
        "prompt_es": f'Implementa "{term}" en un ejemplo práctico y explica cada paso.',
        "prompt_en": f'Implement "{term}" in a practical snippet and explain each step.',
    }
