from fastapi import APIRouter, Depends
from raiku_quiz.api.dependencies import get_answer_service
from raiku_quiz.schemas.quizzes import AnswerRequest, AnswerResponse
from raiku_quiz.services.answer import AnswerService
import structlog

router = APIRouter(prefix="/answers")
log = structlog.get_logger()

# ---------- POST /answers ----------
@router.post("", response_model=AnswerResponse, tags=["Knowledge Base"])
async def answer_question(req: AnswerRequest, service: AnswerService = Depends(get_answer_service)):
    log.info("answer.request_received", query_length=len(req.query))
    answer = await service.get_answer(req.query)
    return AnswerResponse(answer=answer)
