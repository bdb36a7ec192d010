import json, random, structlog
from typing import List, Optional, Sequence
from pydantic import ValidationError
from raiku_quiz.schemas.quizzes import Difficulty, QuizQuestion
from raiku_quiz.services.knowledge_base import QUESTION_COUNT, RAIKU_CONTEXT
from raiku_quiz.services.llm_client import GeminiClient, QUIZ_RESPONSE_SCHEMA
from raiku_quiz.services.offline_quiz_fallback import (
    FALLBACK_QUESTIONS,
    SPECIAL_HARD_QUESTIONS,
    fallback_hard_subset,
)
from raiku_quiz.services.results import Fallback, FallbackReason, Generated, GenerationResult, QuizOutcome
from raiku_quiz.utils.shuffle import fisher_yates_shuffle

log = structlog.get_logger()

PROMPT_TMPL = """Generate {n} quiz questions about Raiku based on the provided context. The difficulty level should be '{difficulty}'. For each question, provide a question text, an array of 4 multiple-choice options, and the 0-based index of the correct answer.

Context:
{context}

Return the result as a JSON array of objects.
"""

def parse_questions(raw_response: str, expected: int) -> GenerationResult:
    """Turn the model's JSON text into questions, or say why it can't be used"""
    try:
        data = json.loads(raw_response.strip())
    except (ValueError, RecursionError, TypeError, AttributeError) as e:
        # oversized integers and deep nesting fail outside JSONDecodeError
        log.warning("quiz.json_parse_failed", error=str(e), content=str(raw_response)[:500])
        return Fallback(FallbackReason.INVALID_JSON, str(e) or type(e).__name__)

    if not isinstance(data, list):
        log.warning("quiz.response_not_array", type=type(data).__name__)
        return Fallback(FallbackReason.INVALID_JSON, "expected a JSON array")

    if len(data) != expected:
        log.warning("quiz.wrong_count", requested=expected, generated=len(data))
        return Fallback(FallbackReason.WRONG_COUNT, f"expected {expected} questions, got {len(data)}")

    try:
        questions = [QuizQuestion.model_validate(item) for item in data]
    except ValidationError as e:
        log.warning("quiz.question_invalid", error=str(e))
        return Fallback(FallbackReason.INVALID_QUESTION, str(e))

    return Generated(questions)

class QuizService:
    """
    Quiz generation with offline fallback.

    Easy/Medium: ask for N questions; use them only if exactly N come back,
    otherwise serve the fallback bank unchanged.
    Hard: ask for N - len(special) questions, append the special set and
    shuffle. When generation fails the gap is filled from the head of the
    fallback bank, so the special set is always part of a configured Hard quiz.
    Without an API key every difficulty gets the plain fallback bank.
    """

    def __init__(
        self,
        client: GeminiClient,
        context: str = RAIKU_CONTEXT,
        question_count: int = QUESTION_COUNT,
        fallback_questions: Sequence[QuizQuestion] = FALLBACK_QUESTIONS,
        special_questions: Sequence[QuizQuestion] = SPECIAL_HARD_QUESTIONS,
        rng: Optional[random.Random] = None,
    ):
        if len(special_questions) >= question_count:
            raise ValueError("special_questions must leave room for generated questions")

        self.client = client
        self.context = context
        self.question_count = question_count
        self.fallback_questions = list(fallback_questions)
        self.special_questions = list(special_questions)
        self.rng = rng

    def build_prompt(self, difficulty: Difficulty, n: int) -> str:
        return PROMPT_TMPL.format(n=n, difficulty=difficulty.value, context=self.context)

    async def generate_questions(self, difficulty: Difficulty, n: int) -> GenerationResult:
        """One structured completion call for `n` questions"""
        if not self.client.configured:
            return Fallback(FallbackReason.NOT_CONFIGURED)

        try:
            raw_response = await self.client.generate_json(self.build_prompt(difficulty, n), QUIZ_RESPONSE_SCHEMA)
        except Exception as e:
            log.error("quiz.generation.failed", difficulty=difficulty.value, error=str(e))
            return Fallback(FallbackReason.REQUEST_FAILED, str(e))

        return parse_questions(raw_response, n)

    async def build_quiz(self, difficulty: Difficulty) -> QuizOutcome:
        difficulty = Difficulty(difficulty)

        if not self.client.configured:
            log.info("quiz.offline_mode", difficulty=difficulty.value)
            return QuizOutcome(list(self.fallback_questions), Fallback(FallbackReason.NOT_CONFIGURED))

        if difficulty is Difficulty.HARD:
            return await self._build_hard_quiz()

        result = await self.generate_questions(difficulty, self.question_count)
        if isinstance(result, Generated):
            log.info("quiz.generated", difficulty=difficulty.value, question_count=len(result.questions))
            return QuizOutcome(result.questions, result)

        log.warning("quiz.fallback", difficulty=difficulty.value, reason=result.reason.value)
        return QuizOutcome(list(self.fallback_questions), result)

    async def _build_hard_quiz(self) -> QuizOutcome:
        to_generate = self.question_count - len(self.special_questions)
        result = await self.generate_questions(Difficulty.HARD, to_generate)

        if isinstance(result, Generated):
            combined: List[QuizQuestion] = result.questions + self.special_questions
            log.info("quiz.hard.merged", generated=len(result.questions), special=len(self.special_questions))
        else:
            combined = fallback_hard_subset(to_generate, self.fallback_questions) + self.special_questions
            log.warning("quiz.hard.fallback_merged", reason=result.reason.value, special=len(self.special_questions))

        fisher_yates_shuffle(combined, self.rng)
        return QuizOutcome(combined, result)

    async def generate_quiz(self, difficulty: Difficulty) -> List[QuizQuestion]:
        """Always returns `question_count` questions; never raises"""
        outcome = await self.build_quiz(difficulty)
        return outcome.questions
