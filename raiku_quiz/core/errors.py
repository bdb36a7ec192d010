# errors.py
class LLMError(Exception):
    """Transport or provider failure from the completion client."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
