"""Question Responders — produce an answer for a free-form question.

  MockResponder: echoes the question reversed; no external calls.
  OpenAIResponder: one chat-completion call to OpenAI with a hard timeout.

The OpenAI responder starts in degraded mode when no API key is
configured: a warning is logged at construction and every answer()
raises ConfigurationError until the service is restarted with a key.

Cancellation: answer() runs inside the caller's task.  Cancelling that
task raises asyncio.CancelledError, which is never converted; the
responder's own deadline raises AnswerTimeoutError instead.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

import openai
from openai import AsyncOpenAI

from assistant.errors import (
    AnswerGenerationError,
    AnswerTimeoutError,
    ConfigurationError,
    ValidationError,
)
from assistant.models import QuestionResponse

log = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful sportsbook assistant. "
    "Give clear, accurate and concise answers to questions about using "
    "the sportsbook application."
)
CONTEXT_PROMPT = " The user is currently in the '{context}' area of the application."
FOCUS_PROMPT = " Keep your answers focused on sportsbook features and betting topics."


@dataclass(frozen=True)
class OpenAISettings:
    api_key: Optional[str]
    model: str = "gpt-3.5-turbo"
    max_tokens: int = 500
    temperature: float = 0.7
    timeout_seconds: float = 30.0


def build_system_prompt(context=None):
    """Return the system instruction, naming the user's area when known."""
    prompt = SYSTEM_PROMPT
    if context and context.strip():
        prompt += CONTEXT_PROMPT.format(context=context)
    return prompt + FOCUS_PROMPT


class MockResponder:
    """Answers every question with the question text reversed."""

    name = "mock"
    configured = True

    async def answer(self, question, context=None):
        reversed_question = question[::-1]
        return QuestionResponse(
            question=question,
            answer=f"Mock answer (context: {context or 'none'}): {reversed_question}",
        )


class OpenAIResponder:
    """Answers questions through the OpenAI chat-completion API."""

    name = "openai"

    def __init__(self, settings, client_factory=None):
        """
        Args:
            settings: OpenAISettings, read once at startup.
            client_factory: Zero-argument callable returning an AsyncOpenAI
                compatible client.  Defaults to a real AsyncOpenAI client
                built from *settings*.  A fresh client is created per call
                so that no connection pool outlives its event loop.
        """
        self._settings = settings
        self._client_factory = client_factory or self._default_client

        if not self.configured:
            log.warning(
                "OPENAI_API_KEY is not set; /assistant/query will fail "
                "until an API key is configured."
            )

    @property
    def configured(self):
        return bool(self._settings.api_key and self._settings.api_key.strip())

    def _default_client(self):
        return AsyncOpenAI(
            api_key=self._settings.api_key,
            timeout=self._settings.timeout_seconds,
            max_retries=0,
        )

    async def answer(self, question, context=None):
        """Ask OpenAI and return the first completion choice.

        Raises:
            ConfigurationError: no API key configured.
            ValidationError: the question is empty.
            AnswerTimeoutError: the call outlived settings.timeout_seconds.
            AnswerGenerationError: any other failure; the cause is chained.
            asyncio.CancelledError: the caller cancelled the request.
        """
        if not self.configured:
            raise ConfigurationError(
                "OpenAI API key is not configured; set OPENAI_API_KEY."
            )
        if not question or not question.strip():
            raise ValidationError("Question must not be empty.")

        settings = self._settings
        log.info(
            "Asking OpenAI (context: %s, question length: %d)",
            context or "none",
            len(question),
        )

        messages = [
            {"role": "system", "content": build_system_prompt(context)},
            {"role": "user", "content": question},
        ]

        client = self._client_factory()
        try:
            completion = await asyncio.wait_for(
                client.chat.completions.create(
                    model=settings.model,
                    messages=messages,
                    max_tokens=settings.max_tokens,
                    temperature=settings.temperature,
                ),
                timeout=settings.timeout_seconds,
            )
            answer = completion.choices[0].message.content
            if answer is None:
                raise ValueError("OpenAI returned a completion without content")
        except (asyncio.TimeoutError, openai.APITimeoutError) as exc:
            log.warning("OpenAI request timed out after %s seconds.", settings.timeout_seconds)
            raise AnswerTimeoutError(
                f"OpenAI request timed out after {settings.timeout_seconds} seconds"
            ) from exc
        except Exception as exc:
            log.error("OpenAI answer generation failed: %s", exc)
            raise AnswerGenerationError("Failed to generate answer using OpenAI") from exc
        finally:
            await client.close()

        usage = getattr(completion, "usage", None)
        if usage is not None:
            log.info(
                "Answer generated (input tokens: %s, output tokens: %s)",
                usage.prompt_tokens,
                usage.completion_tokens,
            )

        return QuestionResponse(question=question, answer=answer)


def build_responder(backend, settings, client_factory=None):
    """Create the responder configured by ASSISTANT_ANSWER_BACKEND."""
    backend = (backend or "").lower()
    if backend == "mock":
        return MockResponder()
    if backend == "openai":
        return OpenAIResponder(settings, client_factory=client_factory)
    raise ConfigurationError(
        f"Unknown answer backend {backend!r}; expected 'mock' or 'openai'."
    )
