import httpx, structlog
from typing import Any, Dict, Optional
from raiku_quiz.core.errors import LLMError
from raiku_quiz.core.settings import Settings

log = structlog.get_logger()

# Structured-output schema for a quiz: array of {question, options, correctAnswerIndex}
QUIZ_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "question": {"type": "STRING"},
            "options": {"type": "ARRAY", "items": {"type": "STRING"}},
            "correctAnswerIndex": {"type": "INTEGER"},
        },
        "required": ["question", "options", "correctAnswerIndex"],
    },
}

class GeminiClient:
    """
    Minimal async client for the Gemini generateContent endpoint.

    One request per call, no retries. Every failure (transport error, non-2xx,
    response without text) surfaces as LLMError so callers have a single thing
    to catch.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 60.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key or ""
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http_client = http_client

    @classmethod
    def from_settings(cls, settings: Settings, http_client: Optional[httpx.AsyncClient] = None) -> "GeminiClient":
        return cls(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            timeout=settings.request_timeout,
            http_client=http_client,
        )

    @property
    def configured(self) -> bool:
        return bool(self.api_key.strip())

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def generate_text(self, prompt: str) -> str:
        """Free-text completion"""
        body = {"contents": [{"parts": [{"text": prompt}]}]}
        return await self._generate(body)

    async def generate_json(self, prompt: str, schema: Dict[str, Any]) -> str:
        """Structured completion constrained to `schema`; the JSON comes back as raw text"""
        body = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": schema,
            },
        }
        return await self._generate(body)

    async def _generate(self, body: Dict[str, Any]) -> str:
        if not self.configured:
            raise LLMError("Gemini API key is not configured.")

        headers = {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json",
        }

        log.info("llm.request.start", model=self.model, structured="generationConfig" in body)

        try:
            if self._http_client is not None:
                resp = await self._http_client.post(self.endpoint, json=body, headers=headers, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    resp = await client.post(self.endpoint, json=body, headers=headers)
        except httpx.HTTPError as e:
            raise LLMError(f"Network error talking to Gemini: {str(e)}") from e

        if resp.status_code in (401, 403):
            raise LLMError("Unauthorized: Invalid Gemini API key.", status_code=resp.status_code)
        elif resp.status_code == 429:
            raise LLMError("Rate limit exceeded.", status_code=resp.status_code)
        elif resp.status_code != 200:
            raise LLMError(f"Unexpected error: {resp.status_code} - {resp.text}", status_code=resp.status_code)

        try:
            resp_data = resp.json()
        except ValueError as e:
            raise LLMError(f"Invalid JSON in response: {str(e)}") from e

        text = extract_text(resp_data)
        if not text:
            raise LLMError("Gemini response contained no text.")

        log.info("llm.request.success", model=self.model, content_length=len(text))
        return text

def extract_text(resp_data: Any) -> str:
    """Concatenated text parts of the first candidate, or '' when there are none"""
    if not isinstance(resp_data, dict):
        return ""
    candidates = resp_data.get("candidates") or []
    if not candidates or not isinstance(candidates[0], dict):
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(p.get("text", "") for p in parts if isinstance(p, dict))
