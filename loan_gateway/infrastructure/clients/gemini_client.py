"""HTTP implementation of EligibilityModelClient for Google Gemini."""

from typing import Any, Dict

import httpx
import structlog

from loan_gateway.core.config import Settings
from loan_gateway.core.metrics import track_eligibility_latency
from loan_gateway.domain.exceptions import EligibilityModelException
from loan_gateway.domain.interfaces import EligibilityModelClient

logger = structlog.get_logger(__name__)


class HttpGeminiClient(EligibilityModelClient):
    """
    HTTP client for the Gemini generateContent REST endpoint.

    Sends a single-turn text prompt and returns the text of the first
    candidate. There is no retry: a failed call surfaces immediately
    as EligibilityModelException.
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        timeout: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "HttpGeminiClient":
        return cls(
            api_key=settings.google_ai_api_key,
            model=settings.ai_model,
            base_url=settings.ai_api_url,
            timeout=settings.ai_request_timeout,
        )

    async def generate(self, prompt: str) -> str:
        url = f"{self._base_url}/models/{self._model}:generateContent"
        payload = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}

        try:
            with track_eligibility_latency():
                async with httpx.AsyncClient(
                    timeout=self._timeout,
                    transport=self._transport,
                ) as client:
                    response = await client.post(
                        url,
                        json=payload,
                        headers={"x-goog-api-key": self._api_key},
                    )
        except httpx.TimeoutException as exc:
            logger.warning("ai_model_timeout", model=self._model)
            raise EligibilityModelException("Generative model request timed out") from exc
        except httpx.HTTPError as exc:
            logger.error("ai_model_transport_error", model=self._model, error=str(exc))
            raise EligibilityModelException(f"Generative model unreachable: {exc}") from exc

        if response.status_code >= 400:
            logger.error(
                "ai_model_error",
                model=self._model,
                status_code=response.status_code,
                response=response.text[:200],
            )
            raise EligibilityModelException(
                message=f"Generative model error: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        return self._extract_text(response.json())

    def _extract_text(self, data: Dict[str, Any]) -> str:
        """Join the text parts of the first candidate."""
        candidates = data.get("candidates") or []
        if not candidates:
            block_reason = (data.get("promptFeedback") or {}).get("blockReason")
            raise EligibilityModelException(
                f"Generative model returned no candidates (block reason: {block_reason})"
            )

        parts = (candidates[0].get("content") or {}).get("parts") or []
        texts = [part["text"] for part in parts if "text" in part]
        if not texts:
            finish_reason = candidates[0].get("finishReason")
            raise EligibilityModelException(
                f"Generative model returned no text (finish reason: {finish_reason})"
            )

        return "".join(texts)
