# services/report_service.py

"""
Stock report generation via the OpenAI chat-completion API.

The OpenAI client is built once per process (see app.py startup) and
handed to ReportGenerator, so routes and tests can swap it out.
"""

from typing import Any, Optional

from openai import OpenAI

from config import AI_MODEL, Settings, get_settings_obj
from logic.report_prompt import build_report_messages

# Fixed sampling parameters for every report
REPORT_MAX_TOKENS = 1500
REPORT_TEMPERATURE = 0.7
REPORT_PRESENCE_PENALTY = 0.5
REPORT_FREQUENCY_PENALTY = 0.5


class ReportConfigError(RuntimeError):
    """Raised when the completion client cannot be used (no API key)."""


class ReportGenerator:
    def __init__(self, client: Optional[Any], model: str = AI_MODEL):
        self.client = client
        self.model = model

    def generate(self, data: str) -> str:
        """
        Ask the model for a Markdown stock report built from `data`.

        Returns the first choice's text, or "" when the provider sends
        back no choices / no content. Provider errors propagate.
        """
        if self.client is None:
            raise ReportConfigError("OPENAI_API_KEY is not configured.")

        messages = build_report_messages(data)

        print(f"[report] calling {self.model} ({len(data)} chars of data)")

        completion = self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            max_tokens=REPORT_MAX_TOKENS,
            temperature=REPORT_TEMPERATURE,
            presence_penalty=REPORT_PRESENCE_PENALTY,
            frequency_penalty=REPORT_FREQUENCY_PENALTY,
        )

        choices = getattr(completion, "choices", None) or []
        if not choices:
            print("[report] warning: completion returned no choices")
            return ""

        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if content is None:
            print("[report] warning: first choice has no content")
            return ""
        return content


def build_report_generator(settings: Optional[Settings] = None) -> ReportGenerator:
    settings = settings or get_settings_obj()
    # Without a key we still build the generator; generate() raises instead.
    client = OpenAI(api_key=settings.OPENAI_API_KEY) if settings.OPENAI_API_KEY else None
    return ReportGenerator(client, model=settings.AI_MODEL)
