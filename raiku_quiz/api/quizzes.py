from fastapi import APIRouter, Depends
from raiku_quiz.api.dependencies import get_quiz_service
from raiku_quiz.schemas.quizzes import QuizRequest, QuizResponse
from raiku_quiz.services.quiz_generation import QuizService
import structlog

router = APIRouter(prefix="/quizzes")
log = structlog.get_logger()

# ---------- POST /quizzes ----------
@router.post("", response_model=QuizResponse, tags=["Quiz Generation"])
async def generate_quiz(req: QuizRequest, service: QuizService = Depends(get_quiz_service)):
    log.info("quiz.request_received", difficulty=req.difficulty.value)
    outcome = await service.build_quiz(req.difficulty)
    log.info("quiz.request_completed",
            difficulty=req.difficulty.value,
            question_count=len(outcome.questions),
            used_fallback=outcome.used_fallback)
    return QuizResponse(difficulty=req.difficulty, questions=outcome.questions)
