"""Question answering DTOs."""

from dataclasses import dataclass, field


@dataclass
class RetrievedChunk:
    """Chunk content with its cosine similarity to the question."""

    content: str
    similarity: float


@dataclass
class QuestionInput:
    """Input for answering a question."""

    question: str
    top_k: int | None = None


@dataclass
class AnswerOutput:
    """Answer plus the contexts it was grounded on."""

    answer: str
    chunks: list[RetrievedChunk] = field(default_factory=list)
