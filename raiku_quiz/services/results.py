from dataclasses import dataclass
from enum import Enum
from typing import List, Union
from raiku_quiz.schemas.quizzes import QuizQuestion

class FallbackReason(str, Enum):
    NOT_CONFIGURED = "not_configured"
    REQUEST_FAILED = "request_failed"
    INVALID_JSON = "invalid_json"
    WRONG_COUNT = "wrong_count"
    INVALID_QUESTION = "invalid_question"

@dataclass(frozen=True)
class Generated:
    questions: List[QuizQuestion]

@dataclass(frozen=True)
class Fallback:
    reason: FallbackReason
    detail: str = ""

GenerationResult = Union[Generated, Fallback]

@dataclass(frozen=True)
class QuizOutcome:
    """Final quiz plus the generation result it was built from"""
    questions: List[QuizQuestion]
    result: GenerationResult

    @property
    def used_fallback(self) -> bool:
        return isinstance(self.result, Fallback)
