"""Prompt assembly for lesson pack generation."""

from __future__ import annotations

from shared.models import LessonInput

from .modules import get_global_module_context


LESSON_PACK_PROMPT = """
You are ASman, an AI teacher assistant specializing in NCERT curriculum for Indian schools.

CONTENT TO PROCESS:
Subject: {subject}
Class Level: {class_level}
Global Module: {global_module}
Content: "{text}"

TASK: Create a comprehensive lesson pack with the following sections:

1. SIMPLIFIED EXPLANATION (500-700 words):
- Start with "Hello students! Today we're going to learn about..."
- Break down the content into simple, age-appropriate language for Class {class_level}
- Use real-world examples that Indian children can relate to
- Include step-by-step explanations
- Add interesting facts and "Did you know?" sections
- Use analogies and comparisons to everyday objects
- Make it engaging and conversational
- Include specific details about what was uploaded and how it connects to the lesson

2. PRACTICAL ACTIVITY (400-500 words):
- Design a hands-on classroom activity that takes 45-60 minutes
- Include specific materials needed (easily available in Indian schools)
- Provide step-by-step instructions for teachers
- Include group work and individual tasks
- Add assessment criteria
- Make it interactive and fun
- Connect directly to the uploaded content
- Include variations for different learning styles

3. QUESTIONS AND ANSWERS (5-7 Q&A pairs):
- Create thought-provoking questions that test understanding
- Include both factual and analytical questions
- Provide detailed answers that reinforce learning
- Make questions progressive (easy to difficult)
- Include one creative/application-based question

Global Module Context: {module_context}

Format your response as valid JSON with this structure:
{{
  "simplified_explanation": "detailed explanation here",
  "practical_activity": "detailed activity here",
  "questions_and_answers": [
    {{"q": "question", "a": "detailed answer"}}
  ],
  "global_module_used": "module name"
}}

Make the content rich, detailed, and specifically tailored to {subject} for Class {class_level} students.
"""


def build_lesson_prompt(lesson_input: LessonInput) -> str:
    """Build the single prompt sent to the model for one lesson pack.

    Input fields are embedded as-is; an empty ``text`` yields an empty quoted
    content line.
    """
    return LESSON_PACK_PROMPT.format(
        subject=lesson_input.subject,
        class_level=lesson_input.class_level,
        global_module=lesson_input.global_module,
        text=lesson_input.text,
        module_context=get_global_module_context(lesson_input.global_module),
    )
