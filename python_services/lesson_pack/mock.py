"""Deterministic lesson pack used without a model or when generation fails."""

from __future__ import annotations

from shared.models import LessonInput, LessonOutput, QuestionAnswer, UploadType

from .modules import get_global_module_name


_UPLOAD_DESCRIPTIONS = {
    UploadType.TEXT: "text content",
    UploadType.PDF: "PDF document",
}

EXPLANATION_TEMPLATE = """Hello students! Today we're going to learn about an exciting topic from your {subject} lesson.

📚 WHAT WE UPLOADED:
We just processed your {upload_description} about "{excerpt}..." This content is from your Class {class_level} {subject} curriculum.

🌟 LET'S UNDERSTAND THIS TOPIC:
Think of this lesson like building blocks - each concept builds on the previous one!

For Class {class_level} students, we can break this down into simple parts:

• Main Concept: The core idea is about understanding how things work in our daily life
• Real Examples: Just like how we see patterns in nature, markets, or festivals
• Step-by-Step: We'll learn this gradually, starting with what you already know
• Fun Facts: Did you know that this concept appears in many places around us?

🔍 DETAILED EXPLANATION:
The uploaded content teaches us important principles that we can see everywhere. When we look around our homes, schools, and communities, we can find examples of these concepts.

For instance, if this is about mathematics, we see numbers and patterns in everything - from the petals on flowers to the arrangement of windows in buildings. If it's about science, we observe these principles in cooking, playing, and even in the way plants grow.

The beauty of learning is that everything connects! This lesson will help you understand not just the textbook content, but how it applies to your real world.

Remember: Learning is like climbing a mountain - each step makes you stronger and gives you a better view of the world below!"""

PRACTICAL_ACTIVITY = """🎯 HANDS-ON CLASSROOM ACTIVITY: "Discovery Learning Adventure"

📋 MATERIALS NEEDED:
• Chart paper (4-5 sheets per group)
• Colored markers and crayons
• Sticky notes (different colors)
• Small everyday objects for demonstration
• Timer or stopwatch
• Camera/phone for documentation

⏰ DURATION: 45-60 minutes

👥 SETUP (10 minutes):
1. Divide class into groups of 4-5 students
2. Give each group different colored materials
3. Assign roles: Leader, Recorder, Presenter, Materials Manager
4. Explain the activity rules and objectives

🔍 MAIN ACTIVITY (30 minutes):

PHASE 1 - EXPLORATION (15 minutes):
• Each group explores one aspect of today's lesson
• Students find real-world examples using the objects provided
• They create visual representations on chart paper
• Record observations on sticky notes

PHASE 2 - CONNECTION (15 minutes):
• Groups connect their findings to the uploaded lesson content
• Create a story or explanation using their discoveries
• Prepare a 2-minute presentation with visuals
• Practice their presentation within the group

🎭 PRESENTATION (15 minutes):
• Each group presents their findings (2 minutes each)
• Other students ask questions and give feedback
• Teacher facilitates discussion and connects all presentations
• Create a class "Knowledge Wall" with all discoveries

📊 ASSESSMENT CRITERIA:
✓ Understanding of core concept (25%)
✓ Creativity in presentation (25%)
✓ Real-world connections (25%)
✓ Team collaboration (25%)

🏆 LEARNING OUTCOMES:
Students will be able to:
• Explain the main concept in their own words
• Identify real-world applications
• Work effectively in teams
• Present ideas confidently

💡 TEACHER TIPS:
- Walk around and guide groups without giving direct answers
- Encourage questions and curiosity
- Take photos of student work for future reference
- Connect each group's findings to the broader curriculum

🎨 VARIATIONS FOR DIFFERENT LEARNERS:
• Visual learners: Focus on drawings and diagrams
• Kinesthetic learners: Use physical objects and movement
• Auditory learners: Include songs, rhymes, or storytelling
• Advanced students: Add research or extension questions"""

# (question, answer) templates, easiest first
QA_TEMPLATES = [
    (
        "What is the main topic we learned about today from the uploaded {subject} content?",
        "The main topic focuses on understanding key concepts from your Class {class_level} {subject} "
        "curriculum. We explored how these ideas connect to your daily life and why they're important "
        "for building stronger knowledge foundations.",
    ),
    (
        "Can you give three real-world examples where we can see this concept in action?",
        "Great question! We can see this concept in: 1) Our homes - like organizing things or solving "
        "daily problems, 2) In nature - observing patterns and relationships, and 3) In our community - "
        "seeing how people work together and share knowledge.",
    ),
    (
        "How does this lesson connect to what we learned in previous classes?",
        "This lesson builds on the foundation we created in earlier classes. It's like adding new floors "
        "to a building - we use the strong base we already have and add new knowledge on top. Each "
        "concept connects to help us understand bigger ideas.",
    ),
    (
        "What was the most interesting part of today's practical activity?",
        "The most exciting part was discovering how the concepts from our textbook actually exist all "
        "around us! When we worked in groups and found real examples, it made the lesson come alive and "
        "become much easier to remember.",
    ),
    (
        "How can we use what we learned today to help us in other subjects?",
        "This is a wonderful question! The thinking skills and problem-solving methods we practiced today "
        "can help us in all subjects. Whether it's solving math problems, understanding science "
        "experiments, or writing creative stories - the same logical thinking applies everywhere.",
    ),
]


def describe_upload(upload_type: UploadType) -> str:
    return _UPLOAD_DESCRIPTIONS.get(upload_type, "audio recording")


def generate_mock_response(lesson_input: LessonInput) -> LessonOutput:
    """Template a lesson pack from the input alone. No randomness, no I/O."""
    fields = {
        "subject": lesson_input.subject,
        "class_level": lesson_input.class_level,
    }
    explanation = EXPLANATION_TEMPLATE.format(
        upload_description=describe_upload(lesson_input.upload_type),
        excerpt=lesson_input.text[:100],
        **fields,
    )
    return LessonOutput(
        simplified_explanation=explanation,
        practical_activity=PRACTICAL_ACTIVITY,
        questions_and_answers=[
            QuestionAnswer(q=q.format(**fields), a=a.format(**fields))
            for q, a in QA_TEMPLATES
        ],
        global_module_used=get_global_module_name(lesson_input.global_module),
    )
