import httpx
import pytest

from raiku_quiz.schemas.quizzes import QuizQuestion
from raiku_quiz.services.llm_client import GeminiClient


@pytest.fixture
def offline_gemini_client():
    """A real, unconfigured GeminiClient whose transport fails the test if it is ever used."""
    def handler(request):
        pytest.fail(f"unexpected network call to {request.url}")

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GeminiClient(api_key="", http_client=http_client)


@pytest.fixture
def small_bank():
    bank = [
        QuizQuestion(question=f"Bank question {i}?", options=["a", "b", "c", "d"], correct_answer_index=i % 4)
        for i in range(5)
    ]
    special = [
        QuizQuestion(question=f"Special question {i}?", options=["w", "x", "y", "z"], correct_answer_index=3)
        for i in range(2)
    ]
    return bank, special
