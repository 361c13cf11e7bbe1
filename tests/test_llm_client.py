"""Bedrock client wrapper: credential checks and response handling."""

import asyncio
import base64

import pytest

from app.config.settings import BedrockConfig
from app.services import llm_client as llm_client_module
from app.services.llm_client import (
    BedrockLlmClient,
    LlmInvocationError,
    is_placeholder_api_key,
)

REAL_KEY = base64.b64encode(b"AKIATEST:secret-value").decode("ascii")


class FakeBedrockRuntime:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    def converse(self, **request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_runtime(monkeypatch: pytest.MonkeyPatch) -> FakeBedrockRuntime:
    runtime = FakeBedrockRuntime(
        response={
            "output": {"message": {"content": [{"text": '{"summary": "ok"}'}]}},
            "usage": {"inputTokens": 300, "outputTokens": 150},
        }
    )
    created = {}

    def fake_create(service_name, **kwargs):
        created.update(service_name=service_name, **kwargs)
        return runtime

    monkeypatch.setattr(llm_client_module, "create_boto3_client", fake_create)
    runtime.created = created
    return runtime


def _config(**overrides) -> BedrockConfig:
    values = {"BEDROCK_API_KEY": REAL_KEY, "BEDROCK_MODEL_ID": "test-model"}
    values.update(overrides)
    return BedrockConfig(**values)


@pytest.mark.parametrize(
    "value",
    [None, "", "   ", "dummy-key-for-development", "sk-your-key-here"],
)
def test_placeholder_keys(value):
    assert is_placeholder_api_key(value)


def test_real_key_is_not_placeholder():
    assert not is_placeholder_api_key(REAL_KEY)


def test_unconfigured_client_never_builds_boto_client(fake_runtime):
    client = BedrockLlmClient(_config(BEDROCK_API_KEY="dummy-key-for-development"))

    assert not client.is_configured()
    assert fake_runtime.created == {}
    with pytest.raises(LlmInvocationError):
        asyncio.run(client.invoke(user_prompt="hello"))


def test_invoke_sends_single_user_turn(fake_runtime):
    client = BedrockLlmClient(_config())

    completion = asyncio.run(client.invoke(user_prompt="Evaluate", max_tokens=1024))

    assert client.is_configured()
    assert fake_runtime.created["aws_access_key_id"] == "AKIATEST"
    assert fake_runtime.created["aws_secret_access_key"] == "secret-value"
    request = fake_runtime.requests[0]
    assert request["modelId"] == "test-model"
    assert request["messages"] == [{"role": "user", "content": [{"text": "Evaluate"}]}]
    assert request["inferenceConfig"]["maxTokens"] == 1024
    assert "system" not in request
    assert completion.text == '{"summary": "ok"}'
    assert completion.model_id == "test-model"
    assert completion.tokens_used == 450


def test_provider_errors_are_wrapped(fake_runtime):
    fake_runtime.error = RuntimeError("ThrottlingException: rate exceeded")
    client = BedrockLlmClient(_config())

    with pytest.raises(LlmInvocationError, match="rate exceeded"):
        asyncio.run(client.invoke(user_prompt="Evaluate"))


def test_empty_response_is_an_error(fake_runtime):
    fake_runtime.response = {"output": {"message": {"content": []}}}
    client = BedrockLlmClient(_config())

    with pytest.raises(LlmInvocationError, match="empty"):
        asyncio.run(client.invoke(user_prompt="Evaluate"))


def test_timeout_is_reported_as_invocation_error(fake_runtime, monkeypatch):
    async def slow_threadpool(func, *args, **kwargs):
        await asyncio.sleep(5)

    monkeypatch.setattr(llm_client_module, "run_in_threadpool", slow_threadpool)
    client = BedrockLlmClient(_config(BEDROCK_TIMEOUT_SECONDS=0.05))

    with pytest.raises(LlmInvocationError, match="timed out"):
        asyncio.run(client.invoke(user_prompt="Evaluate"))
