"""Gemini REST client with circuit breaker protection."""

import asyncio
import time

import httpx
import pybreaker

from canvas_assist.core import get_logger
from canvas_assist.monitoring import MetricsCollector, metrics_collector
from .config import GeminiConfig

logger = get_logger(__name__)


class ModelError(Exception):
    """Model call failed."""

    pass


class ModelTransportError(ModelError):
    """Network, timeout, status or breaker failure."""

    pass


class ModelResponseError(ModelError):
    """The model answered without a usable text payload."""

    pass


class GeminiClient:
    """
    Single-shot text generation against the Gemini REST API.

    One POST per prompt; no retries. Transport failures surface as
    ModelTransportError, empty payloads as ModelResponseError.
    """

    def __init__(
        self,
        config: GeminiConfig,
        metrics: MetricsCollector | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.config = config
        self.metrics = metrics or metrics_collector
        self._client = client or httpx.Client(timeout=config.timeout)

        class BreakerListener(pybreaker.CircuitBreakerListener):
            """Listener for circuit breaker state changes."""

            def state_change(self, cb, old_state, new_state):
                """Called when circuit breaker state changes."""
                logger.warning(
                    "breaker_state_change",
                    breaker=cb.name,
                    from_state=str(old_state),
                    to_state=str(new_state),
                )

        self._breaker = pybreaker.CircuitBreaker(
            fail_max=config.breaker_fail_max,
            reset_timeout=config.breaker_reset_timeout,
            name="gemini-http",
            listeners=[BreakerListener()],
        )

        logger.info("client_init", model=config.model_name)

    def generate(self, prompt: str) -> str:
        """
        Generate text for a prompt.

        Args:
            prompt: Complete prompt text

        Returns:
            Text of the first candidate

        Raises:
            ModelTransportError: Request failed or breaker is open
            ModelResponseError: No text in the response
        """
        body = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": self.config.generation_config(),
        }

        def _make_request() -> httpx.Response:
            response = self._client.post(
                self.config.endpoint,
                params={"key": self.config.api_key},
                json=body,
                timeout=self.config.timeout,
            )
            response.raise_for_status()
            return response

        start = time.time()
        try:
            response = self._breaker.call(_make_request)
        except pybreaker.CircuitBreakerError as e:
            self.metrics.record_model_call(self.config.model_name, "breaker_open", time.time() - start)
            logger.error("generate_failed", error="Circuit breaker open")
            raise ModelTransportError("Circuit breaker open - model unavailable") from e
        except httpx.HTTPError as e:
            self.metrics.record_model_call(self.config.model_name, "http_error", time.time() - start)
            logger.warning("http_error", error=str(e))
            raise ModelTransportError(f"Model request failed: {e}") from e

        self.metrics.record_model_call(self.config.model_name, "success", time.time() - start)

        try:
            data = response.json()
        except ValueError as e:
            raise ModelResponseError("Model response is not JSON") from e

        text = self._first_text(data)
        if not text:
            raise ModelResponseError("No response from model")

        logger.info("generate_complete", content_length=len(text))
        return text

    async def agenerate(self, prompt: str) -> str:
        """Async generation (runs the blocking request in the thread pool)."""
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, self.generate, prompt)

    @staticmethod
    def _first_text(data: object) -> str | None:
        try:
            return data["candidates"][0]["content"]["parts"][0]["text"]  # type: ignore[index]
        except (KeyError, IndexError, TypeError):
            return None

    def close(self) -> None:
        """Close HTTP client"""
        self._client.close()

    def __enter__(self) -> "GeminiClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
