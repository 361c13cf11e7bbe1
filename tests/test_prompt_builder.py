"""Coaching prompt rendering."""

import json

from app.services.prompt_builder import ANALYSIS_STEPS, build_coaching_prompt


def test_prompt_embeds_session_data():
    pitch_data = {"notes": [{"expected": "E4", "sung": "F4"}]}
    prompt = build_coaching_prompt(score=72, duration_seconds=31.5, pitch_data=pitch_data)

    assert "expert vocal coach" in prompt
    assert "Overall Score: 72/100" in prompt
    assert "Recording Duration: 31.5 seconds" in prompt
    assert json.dumps(pitch_data, indent=2) in prompt


def test_prompt_lists_hidden_analysis_steps_in_order():
    prompt = build_coaching_prompt(score=50, duration_seconds=10, pitch_data={})

    positions = [prompt.index(f"**{title}**") for title, _ in ANALYSIS_STEPS]
    assert positions == sorted(positions)
    assert "don't show these steps to the student" in prompt


def test_prompt_describes_every_output_field():
    prompt = build_coaching_prompt(score=50, duration_seconds=10, pitch_data=None)

    for field_name in (
        "summary",
        "strengths",
        "areas_to_improve",
        "recommended_exercises",
        "encouragement",
        "next_session_focus",
        "instructions",
    ):
        assert f'"{field_name}"' in prompt
    assert "Pitch Data: {}" in prompt
