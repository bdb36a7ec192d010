from fastapi import Depends
from raiku_quiz.core.settings import Settings, get_settings
from raiku_quiz.services.answer import AnswerService
from raiku_quiz.services.llm_client import GeminiClient
from raiku_quiz.services.quiz_generation import QuizService

def get_llm_client(settings: Settings = Depends(get_settings)) -> GeminiClient:
    return GeminiClient.from_settings(settings)

def get_answer_service(client: GeminiClient = Depends(get_llm_client)) -> AnswerService:
    return AnswerService(client)

def get_quiz_service(client: GeminiClient = Depends(get_llm_client)) -> QuizService:
    return QuizService(client)
