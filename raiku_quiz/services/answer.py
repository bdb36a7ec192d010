import structlog
from raiku_quiz.services.knowledge_base import RAIKU_CONTEXT
from raiku_quiz.services.llm_client import GeminiClient

log = structlog.get_logger()

CONFIG_ERROR_MESSAGE = "API_KEY is not configured. Please set it up in your environment variables."
CONNECTION_ERROR_MESSAGE = "Sorry, I'm having trouble connecting to the network right now."

PROMPT_TMPL = """You are an expert on Raiku. Based on the following context, answer the user's query. Your answer must be concise and under 200 characters. If the answer is not in the context, say you cannot find an answer.

Context:
{context}

User Query: "{query}"
"""

class AnswerService:
    def __init__(self, client: GeminiClient, context: str = RAIKU_CONTEXT):
        self.client = client
        self.context = context

    def build_prompt(self, query: str) -> str:
        return PROMPT_TMPL.format(context=self.context, query=query)

    async def get_answer(self, query: str) -> str:
        """Answer a free-text question; errors come back as user-facing strings, never raised"""
        if not self.client.configured:
            log.info("answer.not_configured")
            return CONFIG_ERROR_MESSAGE

        try:
            text = await self.client.generate_text(self.build_prompt(query))
            return text.strip()
        except Exception as e:
            log.error("answer.request_failed", error=str(e))
            return CONNECTION_ERROR_MESSAGE
