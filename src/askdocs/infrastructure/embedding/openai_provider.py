"""OpenAI-compatible embedding provider."""

import asyncio
import logging

from openai import AsyncOpenAI, OpenAIError

from askdocs.domain.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


class OpenAIEmbeddingProvider:
    """Embedding provider using OpenAI-compatible API, one request per text."""

    def __init__(
        self,
        client: AsyncOpenAI,
        model: str,
        dimensions: int,
        concurrency: int = 1,
    ) -> None:
        self._client = client
        self._model = model
        self._dimensions = dimensions
        self._concurrency = max(1, concurrency)

    async def embed(self, text: str) -> list[float]:
        """Generate the embedding for a single text."""
        try:
            response = await self._client.embeddings.create(
                model=self._model,
                input=text,
            )
        except OpenAIError as e:
            raise EmbeddingError(f"Error generating embedding: {e}") from e
        if not response.data:
            raise EmbeddingError("Error generating embedding: empty response")
        embedding = response.data[0].embedding
        if len(embedding) != self._dimensions:
            raise EmbeddingError(
                f"Error generating embedding: expected {self._dimensions} dimensions, "
                f"got {len(embedding)}"
            )
        return embedding

    async def embed_many(self, texts: list[str]) -> list[list[float]]:
        """Embed texts in input order; the first failure aborts the whole batch."""
        logger.debug("Embedding %d texts (concurrency=%d)", len(texts), self._concurrency)
        if self._concurrency == 1:
            return [await self.embed(text) for text in texts]

        semaphore = asyncio.Semaphore(self._concurrency)

        async def _bounded(text: str) -> list[float]:
            async with semaphore:
                return await self.embed(text)

        tasks = [asyncio.ensure_future(_bounded(text)) for text in texts]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            # collect outcomes so no failure goes unretrieved
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
