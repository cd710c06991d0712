"""What ASman says in each narration phase, and how each state is presented."""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel

from shared.models import NarrationPhase

EXPLAINING_EXCERPT_CHARS = 800


class NarrationScript(BaseModel):
    """Spoken text for the three narration phases of one lesson."""
    intro: str
    explaining: str
    conclusion: str

    def text_for(self, phase: NarrationPhase) -> str:
        return getattr(self, phase.value)


def build_script(content: str, subject: str, class_level: str) -> NarrationScript:
    return NarrationScript(
        intro=(
            f"Hello my dear Class {class_level} students! I'm ASman, your AI teacher assistant. "
            f"Today I have carefully analyzed the {subject} content you uploaded, and I'm absolutely "
            "excited to explain every detail to you! Are you ready to discover all the amazing things "
            "hidden in your uploaded material?"
        ),
        explaining=(
            "Now let me explain everything about your uploaded content in complete detail! "
            f"{content[:EXPLAINING_EXCERPT_CHARS]}... This is just the beginning of what we can learn "
            "from your upload. Every word, every concept, every example in your uploaded material has "
            "been carefully analyzed by me to help you understand it perfectly!"
        ),
        conclusion=(
            f"Wonderful! We've explored every aspect of your uploaded {subject} content together! "
            "From the specific details you provided to the real-world applications, we've covered it "
            "all. Remember, the content you uploaded today is like a treasure chest of knowledge - each "
            "concept is a precious gem that will help you in all your future learning. Keep that "
            "curiosity alive and always remember how today's upload connects to everything around you!"
        ),
    )


EXPRESSIONS: Dict[NarrationPhase, str] = {
    NarrationPhase.INTRO: "😊",
    NarrationPhase.EXPLAINING: "🤔",
    NarrationPhase.CONCLUSION: "🎉",
}

HEADLINES: Dict[NarrationPhase, str] = {
    NarrationPhase.IDLE: "Ready to Explain Your Upload!",
    NarrationPhase.INTRO: "Analyzing Your Upload...",
    NarrationPhase.EXPLAINING: "Explaining Every Detail...",
    NarrationPhase.CONCLUSION: "Summarizing Your Content...",
}

PLAYING_CAPTION = "ASman is analyzing and explaining your uploaded content in complete detail"
IDLE_CAPTION = "Click play to hear ASman explain everything about your uploaded content"


def expression_for(phase: NarrationPhase) -> str:
    return EXPRESSIONS.get(phase, "😊")
