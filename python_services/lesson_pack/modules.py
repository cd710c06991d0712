"""Global modules and the curriculum catalogs offered to teachers.

A global module is a cultural/pedagogical framing applied to lesson
generation. Lookups are by exact key and fall back to ``auto``.
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel


DEFAULT_MODULE = "auto"

BRAND = {
    "name": "ASman Learning",
    "tagline": "Sky of Knowledge, Roots in India",
    "description": "Teacher Assistant for NCERT Lessons",
}


class GlobalModule(BaseModel):
    value: str
    label: str
    character: str
    flag: str
    description: str
    # Prompt guidance and the name shown with the generated lesson
    context: str
    display_name: str


GLOBAL_MODULES: List[GlobalModule] = [
    GlobalModule(
        value="auto",
        label="Auto Select",
        character="🤖",
        flag="🌍",
        description="AI will choose the best cultural perspective",
        context="Use the best global perspective for this topic",
        display_name="Global Exposure",
    ),
    GlobalModule(
        value="china",
        label="China Focus",
        character="👨‍🏫",
        flag="🇨🇳",
        description="Discipline and structured learning approach",
        context=(
            "Emphasize discipline, structured learning, and systematic approach. "
            "Include concepts of respect for teachers and methodical practice."
        ),
        display_name="Chinese Discipline Methods",
    ),
    GlobalModule(
        value="japan",
        label="Japan Focus",
        character="👩‍🏫",
        flag="🇯🇵",
        description="Precision and mindful learning methods",
        context=(
            "Focus on precision, attention to detail, and mindful learning. "
            "Include concepts of continuous improvement (kaizen) and group harmony."
        ),
        display_name="Japanese Precision Learning",
    ),
    GlobalModule(
        value="us",
        label="US Focus",
        character="👨‍🎓",
        flag="🇺🇸",
        description="Curiosity-driven and innovative thinking",
        context=(
            "Encourage curiosity, innovation, and creative thinking. "
            "Include concepts of questioning, exploration, and individual expression."
        ),
        display_name="American Innovation Approach",
    ),
    GlobalModule(
        value="europe",
        label="Europe Focus",
        character="👩‍🎨",
        flag="🇪🇺",
        description="Creative and artistic learning approaches",
        context=(
            "Emphasize creativity, artistic expression, and critical thinking. "
            "Include concepts of cultural diversity and analytical reasoning."
        ),
        display_name="European Creative Methods",
    ),
]

_MODULES_BY_KEY: Dict[str, GlobalModule] = {m.value: m for m in GLOBAL_MODULES}


def get_global_module(key: str) -> GlobalModule:
    return _MODULES_BY_KEY.get(key) or _MODULES_BY_KEY[DEFAULT_MODULE]


def get_global_module_context(key: str) -> str:
    return get_global_module(key).context


def get_global_module_name(key: str) -> str:
    return get_global_module(key).display_name


CLASS_LEVELS: List[Dict[str, str]] = [
    {"value": str(n), "label": f"Class {n}"} for n in range(1, 6)
]

SUBJECTS: List[Dict[str, str]] = [
    {"value": "mathematics", "label": "Mathematics"},
    {"value": "english", "label": "English"},
    {"value": "hindi", "label": "Hindi"},
    {"value": "environmental-studies", "label": "Environmental Studies"},
    {"value": "science", "label": "Science"},
    {"value": "social-studies", "label": "Social Studies"},
    {"value": "art-craft", "label": "Art & Craft"},
    {"value": "physical-education", "label": "Physical Education"},
]
