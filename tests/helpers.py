"""Shared test doubles and payload builders."""


class FakeLLMClient:
    """Stands in for GeminiClient; records every prompt it receives."""

    def __init__(self, text=None, json_text=None, error=None, configured=True):
        self.text = text
        self.json_text = json_text
        self.error = error
        self._configured = configured
        self.calls = []

    @property
    def configured(self):
        return self._configured

    async def generate_text(self, prompt):
        self.calls.append(("text", prompt, None))
        if self.error:
            raise self.error
        return self.text

    async def generate_json(self, prompt, schema):
        self.calls.append(("json", prompt, schema))
        if self.error:
            raise self.error
        return self.json_text


def make_question_payload(n, prefix="Generated"):
    return [
        {
            "question": f"{prefix} question {i}?",
            "options": [f"{prefix} {i} option {j}" for j in range(4)],
            "correctAnswerIndex": i % 4,
        }
        for i in range(n)
    ]


def as_payload(questions):
    return [q.model_dump(by_alias=True) for q in questions]

