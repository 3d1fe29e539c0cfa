"""Document upload API resource."""

import logging
import re
from pathlib import PurePosixPath, PureWindowsPath
from urllib.parse import unquote_to_bytes

import falcon.asgi

from askdocs.application.dto.document_dto import DocumentIngestInput, IngestionResult
from askdocs.application.ports import UploadStore
from askdocs.application.use_cases.document.ingest_document import IngestDocumentUseCase
from askdocs.domain.exceptions import AskDocsError, UnsupportedFileType
from askdocs.domain.value_objects import FileType

logger = logging.getLogger(__name__)

UPLOAD_FIELD = "file"
INVALID_TYPE_MESSAGE = "Invalid file type. Only PDF, DOCX, and TXT files are allowed."

# RFC 5987: filename*=charset''percent-encoded (two single quotes)
_FILENAME_STAR_RFC5987 = re.compile(r"([\w-]+)''([^;\s]+)")


def _decode_filename(raw: str | None) -> str:
    """Decode filename to UTF-8, fixing mojibake when UTF-8 bytes were read as Latin-1."""
    if not raw or not raw.strip():
        return ""
    raw = raw.strip()
    try:
        return raw.encode("latin-1").decode("utf-8")
    except UnicodeEncodeError:
        return raw
    except UnicodeDecodeError:
        return raw


def _parse_filename_star_from_header(raw_header_value: bytes) -> str | None:
    """Parse Content-Disposition raw value for filename*=charset''percent-encoded (RFC 5987)."""
    if not raw_header_value:
        return None
    decoded = raw_header_value.decode("utf-8", errors="replace")
    idx = decoded.find("filename*=")
    if idx == -1:
        return None
    match = _FILENAME_STAR_RFC5987.match(decoded[idx + len("filename*=") :].strip())
    if not match:
        return None
    charset, encoded = match.groups()
    try:
        return unquote_to_bytes(encoded).decode(charset)
    except (ValueError, LookupError):
        return None


def _get_part_filename(part: object) -> str:
    """Client filename of a multipart part, without any directory components."""
    raw = (getattr(part, "filename", None) or "").strip()
    if not raw:
        headers = getattr(part, "_headers", None)
        if isinstance(headers, dict):
            raw = (_parse_filename_star_from_header(headers.get(b"content-disposition", b"")) or "").strip()
    decoded = _decode_filename(raw) if raw else ""
    # Some browsers send the full client path
    return PurePosixPath(PureWindowsPath(decoded).name).name


class UploadResource:
    """POST /api/upload - multipart upload of one document (field `file`)."""

    def __init__(
        self,
        ingest_document: IngestDocumentUseCase,
        upload_store: UploadStore,
        max_upload_bytes: int,
    ) -> None:
        self._ingest_document = ingest_document
        self._upload_store = upload_store
        self._max_upload_bytes = max_upload_bytes

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Validate the upload, then parse, chunk, embed and store it."""
        content_type = req.content_type or ""
        if "multipart/form-data" not in content_type:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "No file uploaded"}
            return

        original_name = ""
        data: bytes | None = None
        try:
            form = await req.get_media()
            async for part in form:
                if (part.name or "").strip() != UPLOAD_FIELD:
                    continue
                original_name = _get_part_filename(part)
                if not original_name:
                    continue
                if FileType.from_filename(original_name) is None:
                    resp.status = falcon.HTTP_400
                    resp.media = {"error": INVALID_TYPE_MESSAGE}
                    return
                data = await part.stream.read(self._max_upload_bytes + 1)
                break
        except falcon.MediaMalformedError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Invalid multipart: {e}"}
            return

        if data is None:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "No file uploaded"}
            return
        if len(data) > self._max_upload_bytes:
            limit_mb = self._max_upload_bytes // (1024 * 1024)
            resp.status = falcon.HTTP_413
            resp.media = {"error": f"File size too large. Maximum size is {limit_mb}MB."}
            return

        try:
            stored = await self._upload_store.save(bytes(data), original_name)
        except OSError as e:
            logger.error("Could not write upload %s: %s", original_name, e)
            resp.status = falcon.HTTP_500
            resp.media = {"error": "Could not store uploaded file"}
            return

        try:
            result = await self._ingest_document.execute(
                DocumentIngestInput(upload=stored, original_name=original_name)
            )
        except UnsupportedFileType:
            resp.status = falcon.HTTP_400
            resp.media = {"error": INVALID_TYPE_MESSAGE}
            return
        except AskDocsError as e:
            logger.error("Error processing upload %s: %s", original_name, e)
            resp.status = falcon.HTTP_500
            resp.media = {"error": str(e)}
            return

        resp.media = _ingestion_to_dict(result)
        resp.status = falcon.HTTP_200


def _ingestion_to_dict(result: IngestionResult) -> dict:
    d = result.document
    return {
        "message": "File processed and stored successfully",
        "document": {
            "id": str(d.id),
            "filename": d.filename,
            "original_name": d.original_name,
            "upload_date": d.upload_date.isoformat(),
        },
        "chunks_count": result.chunks_count,
    }
