"""Thin Bedrock client wrapper for single-turn coaching invocations."""

from __future__ import annotations

import asyncio
import base64
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from app.config.settings import BedrockConfig
from app.services.aws import create_boto3_client

logger = logging.getLogger(__name__)

# Values shipped in sample .env files; treated the same as a missing key.
PLACEHOLDER_API_KEYS = frozenset({"dummy-key-for-development"})
PLACEHOLDER_API_KEY_MARKERS = ("your-key-here",)


class LlmInvocationError(RuntimeError):
    """Raised when the Bedrock invocation fails."""


@dataclass(frozen=True)
class LlmCompletion:
    """Text returned by the model plus the usage Bedrock reported for it."""

    text: str
    model_id: str
    input_tokens: int | None = None
    output_tokens: int | None = None

    @property
    def tokens_used(self) -> int | None:
        if self.input_tokens is None and self.output_tokens is None:
            return None
        return (self.input_tokens or 0) + (self.output_tokens or 0)


def is_placeholder_api_key(secret_value: Optional[str]) -> bool:
    """Return True when the credential is missing or a development sentinel."""

    if secret_value is None:
        return True

    value = secret_value.strip()
    if not value or value in PLACEHOLDER_API_KEYS:
        return True
    return any(marker in value for marker in PLACEHOLDER_API_KEY_MARKERS)


def _decode_bedrock_api_key(secret_value: Optional[str]) -> tuple[str, str] | None:
    """Decode the BEDROCK_API_KEY secret into access/secret key components."""

    if not secret_value:
        return None

    try:
        decoded_bytes = base64.b64decode(secret_value.strip())
    except ValueError:
        decoded_bytes = secret_value.encode("utf-8", "ignore")

    filtered = "".join(chr(b) for b in decoded_bytes if 31 < b < 127)
    if ":" not in filtered:
        return None
    access_key, secret_key = filtered.split(":", 1)
    return access_key, secret_key


class BedrockLlmClient:
    """Invoke an Amazon Bedrock model with a single user turn."""

    def __init__(self, config: BedrockConfig) -> None:
        self._config = config
        self._model_id = config.model_id
        self._client = None

        secret_value = config.api_key.get_secret_value() if config.api_key else None
        self._configured = not is_placeholder_api_key(secret_value)
        if not self._configured:
            return

        api_key_tuple = _decode_bedrock_api_key(secret_value)
        try:
            self._client = create_boto3_client(
                "bedrock-runtime",
                region_name=config.region,
                aws_access_key_id=api_key_tuple[0] if api_key_tuple else None,
                aws_secret_access_key=api_key_tuple[1] if api_key_tuple else None,
                timeout_seconds=config.timeout_seconds,
            )
        except Exception as exc:  # pragma: no cover - configuration issue
            logger.warning("Could not initialise Bedrock client: %s", exc)
            self._client = None

    @property
    def model_id(self) -> str:
        return self._model_id

    def is_configured(self) -> bool:
        """Whether a real credential was supplied."""

        return self._configured

    async def invoke(
        self,
        *,
        user_prompt: str,
        system_prompt: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> LlmCompletion:
        """Run a Bedrock `converse` call and return the aggregate text output."""

        if self._client is None:
            raise LlmInvocationError("Bedrock client is not configured")

        target_model_id = self._model_id
        inference_cfg = {
            "maxTokens": max_tokens or self._config.max_tokens,
            "temperature": (
                temperature
                if temperature is not None
                else self._config.temperature
            ),
        }

        def _call() -> dict:
            request: dict = {
                "modelId": target_model_id,
                "messages": [{"role": "user", "content": [{"text": user_prompt}]}],
                "inferenceConfig": inference_cfg,
            }
            if system_prompt:
                request["system"] = [{"text": system_prompt}]
            return self._client.converse(**request)

        try:
            response = await asyncio.wait_for(
                run_in_threadpool(_call),
                timeout=self._config.timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            raise LlmInvocationError(
                f"Bedrock call timed out after {self._config.timeout_seconds}s"
            ) from exc
        except Exception as exc:
            raise LlmInvocationError(str(exc)) from exc

        content_blocks = (
            response.get("output", {})
            .get("message", {})
            .get("content", [])
        )
        texts = [block.get("text", "") for block in content_blocks if block.get("text")]
        text = "\n".join(texts).strip()
        if not text:
            raise LlmInvocationError("Bedrock returned an empty response")

        usage = response.get("usage") or {}
        return LlmCompletion(
            text=text,
            model_id=target_model_id,
            input_tokens=usage.get("inputTokens"),
            output_tokens=usage.get("outputTokens"),
        )


__all__ = [
    "BedrockLlmClient",
    "LlmCompletion",
    "LlmInvocationError",
    "is_placeholder_api_key",
]
