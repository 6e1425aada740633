"""
Command Interpreter
Turns a free-text command into a change set for one component.
"""

import asyncio

from pydantic import ValidationError as PydanticValidationError

from canvas_assist.clients import GeminiClient, ModelError
from canvas_assist.core import (
    get_logger,
    extract_json,
    clean_command,
    JSONParseError,
    LogContext,
    ValidationError,
    MAX_COMMAND_LENGTH,
    trace_operation_async,
)
from canvas_assist.monitoring import MetricsCollector, metrics_collector
from canvas_assist.sync import ComponentSnapshot
from .context import ContextBuilder
from .heuristics import infer, infer_changes
from .models import (
    CommandAction,
    CommandRequest,
    CommandResult,
    ModelReply,
    PageContext,
    ResultSource,
    DEFAULT_SUGGESTIONS,
)

logger = get_logger(__name__)

DEGRADED_CONFIDENCE = 0.75


class CommandInterpreter:
    """
    Interprets commands with the model when configured, heuristics otherwise.

    Transport and parse failures never escape: they route to the same
    heuristic fallback used when no model client is configured.
    """

    def __init__(
        self,
        client: GeminiClient | None = None,
        context_builder: ContextBuilder | None = None,
        metrics: MetricsCollector | None = None,
        timeout: float | None = None,
        max_command_length: int = MAX_COMMAND_LENGTH,
    ) -> None:
        self.client = client
        self.context_builder = context_builder or ContextBuilder()
        self.metrics = metrics or metrics_collector
        self.timeout = timeout
        self.max_command_length = max_command_length

        logger.info("initialized", mode="model" if client is not None else "heuristic")

    @property
    def uses_model(self) -> bool:
        return self.client is not None

    async def interpret(
        self,
        command: str,
        snapshot: ComponentSnapshot,
        page: PageContext | None = None,
    ) -> CommandResult:
        """
        Interpret one command against a component snapshot.

        Raises:
            ValidationError: Empty or oversized command, or malformed request
        """
        request = self._build_request(command, snapshot, page)

        with LogContext(component_id=snapshot.component_id):
            async with trace_operation_async(
                "interpret_command", component_type=snapshot.component_type
            ):
                if self.client is None:
                    result = self._fallback(request, "no_credential")
                else:
                    result = await self._interpret_with_model(request)

        self.metrics.record_command(result.source.value)
        logger.info(
            "command_interpreted",
            source=result.source.value,
            confidence=result.confidence,
            changes=len(result.changes),
        )
        return result

    def _build_request(
        self, command: str, snapshot: ComponentSnapshot, page: PageContext | None
    ) -> CommandRequest:
        text = clean_command(command, self.max_command_length)
        try:
            return CommandRequest(command=text, snapshot=snapshot, page=page or PageContext())
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid command request: {e}") from e

    async def _interpret_with_model(self, request: CommandRequest) -> CommandResult:
        prompt = self.context_builder.build(request)

        try:
            call = self.client.agenerate(prompt)
            if self.timeout is not None:
                text = await asyncio.wait_for(call, timeout=self.timeout)
            else:
                text = await call
        except asyncio.TimeoutError:
            logger.warning("model_timeout", timeout=self.timeout)
            return self._fallback(request, "timeout")
        except ModelError as e:
            logger.warning("model_failed", error=str(e))
            return self._fallback(request, "transport")

        try:
            payload = extract_json(text)
        except JSONParseError as e:
            logger.warning("model_parse_failed", error=str(e), preview=text[:200])
            return self._fallback(request, "parse")

        try:
            reply = ModelReply.model_validate(payload)
        except PydanticValidationError as e:
            logger.warning("model_reply_invalid", errors=e.error_count())
            return self._degraded(request)

        return reply.to_result()

    def _fallback(self, request: CommandRequest, reason: str) -> CommandResult:
        """Heuristic result shared by every fallback trigger."""
        self.metrics.record_fallback(reason)
        logger.info("heuristic_fallback", reason=reason)
        return infer(request.command, request.snapshot)

    def _degraded(self, request: CommandRequest) -> CommandResult:
        """Model answered with unusable JSON: acknowledge, infer the changes."""
        self.metrics.record_fallback("invalid_reply")
        return CommandResult(
            success=True,
            action=CommandAction.STYLE_CHANGE,
            changes=infer_changes(request.command, request.snapshot),
            reasoning=(
                f'Model processed: "{request.command}" '
                "(acknowledgement only; changes inferred from keywords)"
            ),
            confidence=DEGRADED_CONFIDENCE,
            suggestions=list(DEFAULT_SUGGESTIONS),
            source=ResultSource.MODEL_DEGRADED,
        )
