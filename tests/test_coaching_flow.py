"""Orchestrator state machine: configured, succeeded, and fallback paths."""

import asyncio

import pytest
from conftest import VALID_PROVIDER_JSON, FakeLlmClient

from app.pipelines.coaching import FeedbackOrchestrator, FeedbackResult, generate_mock_feedback
from app.services.llm_client import LlmInvocationError
from app.services.response_contract import DEGRADED_ENCOURAGEMENT


def _run(orchestrator: FeedbackOrchestrator, session):
    return asyncio.run(orchestrator.generate_coaching_feedback(session))


def test_unconfigured_client_is_never_called(session_input):
    client = FakeLlmClient(configured=False, text=VALID_PROVIDER_JSON)
    orchestrator = FeedbackOrchestrator(client)

    result = _run(orchestrator, session_input)

    assert not orchestrator.is_configured()
    assert client.calls == []
    assert result.used_fallback
    assert not result.succeeded_via_provider
    assert result.provider_error is None
    assert result.provider_model_id is None
    assert result.feedback == generate_mock_feedback(session_input)


def test_provider_success_returns_parsed_feedback(session_input):
    client = FakeLlmClient(text=VALID_PROVIDER_JSON, model_id="claude-on-bedrock")
    orchestrator = FeedbackOrchestrator(client, max_tokens=1024)

    result = _run(orchestrator, session_input)

    assert result.succeeded_via_provider
    assert not result.used_fallback
    assert result.provider_model_id == "claude-on-bedrock"
    assert result.provider_error is None
    assert result.tokens_used == 200
    assert result.feedback.summary == "Solid session with a steady middle register."
    assert len(client.calls) == 1
    assert client.calls[0]["max_tokens"] == 1024
    assert "Overall Score: 82/100" in client.calls[0]["user_prompt"]


def test_unparseable_reply_still_counts_as_provider_success(session_input):
    client = FakeLlmClient(text="Lovely tone, keep working on breath.")
    result = _run(FeedbackOrchestrator(client), session_input)

    assert result.succeeded_via_provider
    assert not result.used_fallback
    assert result.feedback.summary == "Lovely tone, keep working on breath."
    assert result.feedback.encouragement == DEGRADED_ENCOURAGEMENT


@pytest.mark.parametrize(
    "error",
    [
        LlmInvocationError("AccessDeniedException: bad credentials"),
        LlmInvocationError("Bedrock call timed out after 30.0s"),
        ValueError("malformed response"),
    ],
)
def test_provider_failure_falls_back_to_mock(session_input, error):
    client = FakeLlmClient(error=error)

    result = _run(FeedbackOrchestrator(client), session_input)

    assert len(client.calls) == 1
    assert result.used_fallback
    assert not result.succeeded_via_provider
    assert result.provider_model_id is None
    assert result.provider_error == str(error)
    assert result.feedback == generate_mock_feedback(session_input)


def test_cancellation_is_not_swallowed(session_input):
    client = FakeLlmClient(error=asyncio.CancelledError())

    with pytest.raises(asyncio.CancelledError):
        _run(FeedbackOrchestrator(client), session_input)


def test_simple_feedback_returns_summary_only(session_input):
    client = FakeLlmClient(configured=False)

    summary = asyncio.run(FeedbackOrchestrator(client).generate_simple_feedback(session_input))

    assert summary == generate_mock_feedback(session_input).summary


def test_result_rejects_inconsistent_flags(session_input):
    feedback = generate_mock_feedback(session_input)

    with pytest.raises(ValueError):
        FeedbackResult(succeeded_via_provider=True, feedback=feedback, used_fallback=True)
    with pytest.raises(ValueError):
        FeedbackResult(
            succeeded_via_provider=False,
            feedback=feedback,
            used_fallback=True,
            provider_model_id="model",
        )
