"""Question generation."""

from .generator import QUESTION_TEXT, QuestionGenerator, format_answer

__all__ = [
    "QUESTION_TEXT",
    "QuestionGenerator",
    "format_answer",
]
