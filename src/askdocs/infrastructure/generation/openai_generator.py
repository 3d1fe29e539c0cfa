"""Grounded answer generation with an OpenAI-compatible chat completions API."""

import logging

from openai import AsyncOpenAI, OpenAIError

from askdocs.application.dto.answer_dto import RetrievedChunk
from askdocs.domain.exceptions import GenerationError

logger = logging.getLogger(__name__)

INSUFFICIENT_CONTEXT_ANSWER = "I don't have enough information to answer this question."

SYSTEM_PROMPT = (
    "You are a helpful assistant that answers questions based solely on the provided "
    "context. If the context doesn't contain the answer, acknowledge that you don't "
    "have enough information."
)


def build_prompt(question: str, contexts: list[RetrievedChunk]) -> str:
    """Compose the user prompt: instruction, numbered contexts, question."""
    context_block = "\n\n".join(f"[{i}] {ctx.content}" for i, ctx in enumerate(contexts, start=1))
    return (
        "You are an assistant. Answer the question using only the provided context. "
        f'If you cannot find the answer in the context, say "{INSUFFICIENT_CONTEXT_ANSWER}"\n\n'
        f"Context:\n{context_block}\n\n"
        f"Question: {question}\n\n"
        "Answer:"
    )


class OpenAIAnswerGenerator:
    """Answer generator using chat completions at a fixed low temperature."""

    def __init__(
        self,
        client: AsyncOpenAI,
        model: str,
        temperature: float = 0.2,
        max_tokens: int = 500,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens

    async def answer(self, question: str, contexts: list[RetrievedChunk]) -> str:
        """Answer question from contexts (ranked, most similar first)."""
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": build_prompt(question, contexts)},
                ],
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except OpenAIError as e:
            raise GenerationError(f"Error generating response: {e}") from e
        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise GenerationError("Error generating response: empty completion")
        logger.debug("Generated answer from %d contexts", len(contexts))
        return content.strip()
