"""Slack slash-command resources.

Slack treats any non-200 (or slow) response as a failed command, so these
handlers answer 200 in every case and report failures as ephemeral messages.
"""

import logging

import falcon.asgi

from askdocs.application.dto.answer_dto import QuestionInput
from askdocs.application.use_cases.question.answer_question import AnswerQuestionUseCase

logger = logging.getLogger(__name__)

USAGE_HINT = "Please provide a question after the slash command."


def _form_value(form: object, key: str) -> str:
    """First value for key in a parsed form (values may repeat as lists)."""
    if not isinstance(form, dict):
        return ""
    value = form.get(key)
    if isinstance(value, list):
        value = value[0] if value else ""
    return value if isinstance(value, str) else ""


class SlackAskResource:
    """POST /api/slack/ask - slash command payload (form-encoded `text`)."""

    def __init__(self, answer_question: AnswerQuestionUseCase) -> None:
        self._answer_question = answer_question

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Answer the slash command text in channel; errors stay ephemeral."""
        resp.status = falcon.HTTP_200
        try:
            form = await req.get_media(default_when_empty={})
            text = _form_value(form, "text").strip()
            if not text:
                resp.media = {"response_type": "ephemeral", "text": USAGE_HINT}
                return
            result = await self._answer_question.execute(QuestionInput(question=text))
            resp.media = {"response_type": "in_channel", "text": result.answer}
        except Exception as e:
            logger.exception("Error processing Slack question")
            resp.status = falcon.HTTP_200
            resp.media = {"response_type": "ephemeral", "text": f"Error: {e}"}


class SlackCommandForwardResource:
    """POST / - Slack apps configured with the bare host URL; forwards slash commands."""

    def __init__(self, slack_resource: SlackAskResource) -> None:
        self._slack_resource = slack_resource

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            form = await req.get_media(default_when_empty={})
        except (falcon.MediaMalformedError, falcon.HTTPUnsupportedMediaType):
            form = {}
        command = _form_value(form, "command")
        if not command:
            raise falcon.HTTPNotFound()
        logger.info("Slack command %s received on root path, forwarding", command)
        await self._slack_resource.on_post(req, resp)
