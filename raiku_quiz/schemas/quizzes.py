from enum import Enum
from typing import List
from pydantic import BaseModel, ConfigDict, Field

class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

class QuizQuestion(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    question: str
    options: List[str] = Field(..., description="Answer options, four per question")
    correct_answer_index: int = Field(..., alias="correctAnswerIndex", description="0-based index into options")

class AnswerRequest(BaseModel):
    query: str = Field(..., description="Free-text question about Raiku")

class AnswerResponse(BaseModel):
    answer: str

class QuizRequest(BaseModel):
    difficulty: Difficulty = Difficulty.MEDIUM

class QuizResponse(BaseModel):
    difficulty: Difficulty
    questions: List[QuizQuestion]
