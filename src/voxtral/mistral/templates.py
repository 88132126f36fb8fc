"""Built-in transformations offered for every memo."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PromptTemplate:
    name: str
    icon: str
    system_prompt: str
    is_auto_run: bool = False
    sort_order: int = 0


SUMMARY = PromptTemplate(
    name="Summary",
    icon="doc.text",
    system_prompt=(
        "Summarize this voice memo transcript as 2-4 concise bullet points. "
        "Bold the key phrases using Markdown. Identify the central question "
        "or decision if present."
    ),
    is_auto_run=True,
    sort_order=0,
)

TODO_LIST = PromptTemplate(
    name="Todo List",
    icon="checklist",
    system_prompt=(
        "Extract all action items and tasks from this transcript as a Markdown "
        "checklist. Only include tasks that are explicitly or implicitly mentioned."
    ),
    sort_order=1,
)

TRANSLATE_TO_ENGLISH = PromptTemplate(
    name="Translate to English",
    icon="globe",
    system_prompt=(
        "Translate the following transcript to English. Preserve the original "
        "meaning and tone."
    ),
    sort_order=2,
)

JOURNAL_ENTRY = PromptTemplate(
    name="Journal Entry",
    icon="book",
    system_prompt=(
        "Rewrite this transcript as a structured daily journal entry. Organize "
        "by topics, clean up spoken language into clear written prose."
    ),
    sort_order=3,
)

BUILT_IN_TEMPLATES: tuple[PromptTemplate, ...] = (
    SUMMARY,
    TODO_LIST,
    TRANSLATE_TO_ENGLISH,
    JOURNAL_ENTRY,
)


def auto_run_templates() -> list[PromptTemplate]:
    return [t for t in BUILT_IN_TEMPLATES if t.is_auto_run]
