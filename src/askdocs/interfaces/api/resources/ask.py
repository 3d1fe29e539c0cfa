"""Question answering API resource."""

import logging

import falcon.asgi

from askdocs.application.dto.answer_dto import AnswerOutput, QuestionInput
from askdocs.application.use_cases.question.answer_question import AnswerQuestionUseCase
from askdocs.domain.exceptions import AskDocsError, ValidationError

logger = logging.getLogger(__name__)


class AskResource:
    """POST /api/ask - answer a question from the uploaded documents."""

    def __init__(self, answer_question: AnswerQuestionUseCase) -> None:
        self._answer_question = answer_question

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Answer {question} with the chunks used as context."""
        try:
            body = await req.get_media()
        except (falcon.MediaNotFoundError, falcon.MediaMalformedError):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid request body"}
            return

        question = body.get("question") if isinstance(body, dict) else None
        if not isinstance(question, str) or not question.strip():
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Question is required"}
            return

        try:
            result = await self._answer_question.execute(QuestionInput(question=question))
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except AskDocsError as e:
            logger.error("Error processing question: %s", e)
            resp.status = falcon.HTTP_500
            resp.media = {"error": str(e)}
            return

        resp.media = answer_to_dict(result)
        resp.status = falcon.HTTP_200


def answer_to_dict(result: AnswerOutput) -> dict:
    return {
        "answer": result.answer,
        "chunks": [
            {"content": c.content, "similarity": c.similarity} for c in result.chunks
        ],
    }
