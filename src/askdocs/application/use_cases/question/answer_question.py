"""Answer question use case - retrieve then generate."""

import logging

from askdocs.application.dto.answer_dto import AnswerOutput, QuestionInput, RetrievedChunk
from askdocs.application.ports import AnswerGenerator, EmbeddingProvider, UnitOfWorkFactory
from askdocs.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

NO_INFORMATION_ANSWER = "I don't have any relevant information to answer this question."


class AnswerQuestionUseCase:
    """Embed question, fetch top-k similar chunks, answer from them."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        embedding_provider: EmbeddingProvider,
        answer_generator: AnswerGenerator,
        top_k: int = 5,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._embedding_provider = embedding_provider
        self._answer_generator = answer_generator
        self._top_k = top_k

    async def execute(self, input_data: QuestionInput) -> AnswerOutput:
        """Answer the question; the answer generator is skipped when nothing matches."""
        question = (input_data.question or "").strip()
        if not question:
            raise ValidationError("Question is required")
        top_k = input_data.top_k if input_data.top_k is not None else self._top_k
        if top_k < 1:
            raise ValidationError("top_k must be at least 1")

        query_embedding = await self._embedding_provider.embed(question)

        async with self._uow_factory() as uow:
            results = await uow.chunks.search(query_embedding, limit=top_k)

        # stable sort: equal similarities keep the store's order
        ranked = sorted(results, key=lambda r: r["similarity"], reverse=True)[:top_k]
        contexts = [
            RetrievedChunk(content=r["content"], similarity=r["similarity"]) for r in ranked
        ]
        if not contexts:
            logger.info("No stored chunks matched the question")
            return AnswerOutput(answer=NO_INFORMATION_ANSWER, chunks=[])

        answer = await self._answer_generator.answer(question, contexts)
        return AnswerOutput(answer=answer, chunks=contexts)
