"""Gemini implementation of the TranscriptionService interface."""

from google import genai
from google.genai import errors, types

from transcriptai.exceptions import QuotaExceededError, TranscriptionError
from transcriptai.logging import setup_logging

from .interfaces import TranscriptionService

logger = setup_logging()

RATE_LIMITED_STATUS = 429


class GeminiTranscriber(TranscriptionService):
    """Transcribes and translates media to English using Google Gemini."""

    def __init__(
        self,
        client: genai.Client,
        model_name: str,
        prompt: str,
        temperature: float = 0.2,
    ):
        self._client = client
        self._model_name = model_name
        self._prompt = prompt
        self._temperature = temperature

    async def transcribe(self, media: bytes, mime_type: str) -> str:
        """
        Sends media inline with the transcription prompt and returns the text.

        The SDK base64-encodes inline bytes for transport.

        Raises:
            QuotaExceededError: If Gemini answers with HTTP 429.
            TranscriptionError: If the Gemini API call fails otherwise.
        """
        logger.info(
            "Requesting Gemini transcription",
            extra={
                "model": self._model_name,
                "mime_type": mime_type,
                "size": len(media),
            },
        )
        try:
            response = await self._client.aio.models.generate_content(
                model=self._model_name,
                contents=[
                    types.Part.from_bytes(data=media, mime_type=mime_type),
                    self._prompt,
                ],
                config=types.GenerateContentConfig(temperature=self._temperature),
            )
        except errors.APIError as e:
            if e.code == RATE_LIMITED_STATUS:
                logger.warning("Gemini quota exceeded", extra={"code": e.code})
                raise QuotaExceededError(cause=e) from e
            logger.exception("Gemini API call failed", extra={"code": e.code})
            raise TranscriptionError(
                e.message or "Failed to generate transcript.", cause=e
            ) from e
        except Exception as e:
            logger.exception("Gemini API call failed")
            raise TranscriptionError(
                str(e) or "Failed to generate transcript.", cause=e
            ) from e

        text = response.text or ""
        logger.info("Gemini transcription completed", extra={"length": len(text)})
        return text
