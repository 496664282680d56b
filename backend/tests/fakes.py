"""Scripted stand-ins for external collaborators."""

import asyncio
import json

from services.gemini_client import BaseTextClient


def ai_payload(score=72, **overrides) -> str:
    payload = {
        "score": score,
        "reasons": ["Relevant frontend experience"],
        "strengths": ["React"],
        "weaknesses": ["No TypeScript"],
        "recommendation": "Proceed to interview",
    }
    payload.update(overrides)
    return json.dumps(payload)


class FakeTextClient(BaseTextClient):
    """Returns canned text per prompt.

    ``responses`` maps a substring of the prompt (e.g. a candidate name) to
    either the text to return or an exception to raise. Prompts matching no
    key get ``default``, which may also be an exception.
    """

    def __init__(self, responses=None, default=None, delay=0.0):
        self.responses = responses or {}
        self.default = default if default is not None else ai_payload()
        self.delay = delay
        self.calls: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def complete(self, prompt, format_instructions):
        self.calls.append(prompt)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            for marker, response in self.responses.items():
                if marker in prompt:
                    if isinstance(response, BaseException):
                        raise response
                    return response
            if isinstance(self.default, BaseException):
                raise self.default
            return self.default
        finally:
            self.in_flight -= 1
