"""Sentence-boundary aware text chunker."""

from askdocs.application.dto.chunking_config import ChunkingConfig

SENTENCE_TERMINATORS = (".", "?", "!")


class SentenceBoundaryChunker:
    """Fixed-size windows with overlap, cut after a sentence end when one is close.

    A window that does not reach the end of the text is shortened to end right
    after its last '.', '?' or '!' if that character sits inside the trailing
    ``chunk_overlap`` characters of the window. The next window starts
    ``chunk_overlap`` characters before the previous one ended.
    """

    def chunk(self, text: str, config: ChunkingConfig) -> list[str]:
        """Split text into overlapping chunks."""
        chunk_size = config.chunk_size
        chunk_overlap = config.chunk_overlap
        length = len(text)
        chunks: list[str] = []
        start = 0
        while start < length:
            end = start + chunk_size
            window = text[start:end]
            if end >= length:
                _append_stripped(chunks, window)
                break

            last_break = max(window.rfind(t) for t in SENTENCE_TERMINATORS)
            if last_break != -1 and last_break > chunk_size - chunk_overlap:
                end = start + last_break + 1
                window = text[start:end]

            _append_stripped(chunks, window)
            # always advance, even when a short sentence cut meets a wide overlap
            start = max(end - chunk_overlap, start + 1)
        return chunks


def _append_stripped(chunks: list[str], window: str) -> None:
    stripped = window.strip()
    if stripped:
        chunks.append(stripped)
