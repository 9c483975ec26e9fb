from pydantic import BaseModel
from pydantic_ai import Agent
from pydantic_ai.models import Model


class FlashcardSuggestion(BaseModel):
    front: str
    back: str


def get_flashcard_agent(model: Model) -> Agent[None, FlashcardSuggestion]:
    return Agent(
        model,
        output_type=FlashcardSuggestion,
        instructions="""
        Generate ONE study flashcard about the topic given by the user.
        The requested difficulty is one of easy, medium or hard:
        * easy: a basic definition or a single well-known fact
        * medium: a relationship, cause or comparison that needs some understanding
        * hard: an edge case, derivation or application that needs deep knowledge

        front: [Standalone question with minimal wording]
        back: [Precise answer, optionally with a short explanation]

        Both sides must be non-empty plain text.
        """,
    )


def build_flashcard_prompt(topic: str, difficulty: str) -> str:
    return f"Generate a flashcard about {topic} at {difficulty} difficulty level."
