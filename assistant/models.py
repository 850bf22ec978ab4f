"""Request / response shapes exchanged with the sportsbook frontend."""

from dataclasses import asdict, dataclass
from typing import Optional

from assistant.errors import ValidationError


@dataclass(frozen=True)
class Article:
    """One help article: plain-text title plus an HTML content fragment."""

    title: str
    content: str

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class QuestionRequest:
    question: str
    context: Optional[str] = None

    @classmethod
    def from_payload(cls, body):
        """Build a request from a decoded JSON body.

        Raises:
            ValidationError: if the question is missing, not a string or
                blank, or the context is neither a string nor null.
        """
        if not isinstance(body, dict):
            raise ValidationError("Request body must be a JSON object.")

        question = body.get("question")
        if not isinstance(question, str) or not question.strip():
            raise ValidationError("Question must not be empty.")

        context = body.get("context")
        if context is not None and not isinstance(context, str):
            raise ValidationError("Context must be a string.")

        return cls(question=question, context=context)


@dataclass(frozen=True)
class QuestionResponse:
    question: str
    answer: str

    def to_dict(self):
        return asdict(self)
