"""Answer generator port - grounded completion."""

from typing import Protocol

from askdocs.application.dto.answer_dto import RetrievedChunk


class AnswerGenerator(Protocol):
    """Port for answering a question from ranked contexts."""

    async def answer(self, question: str, contexts: list[RetrievedChunk]) -> str: ...
