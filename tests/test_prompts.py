from app.llm.prompts import (
    SYSTEM_PROMPT,
    generate_questions_prompt,
    generate_behavioral_questions_prompt,
    build_messages,
)


def test_questions_prompt_includes_inputs():
    prompt = generate_questions_prompt("Frontend Screen", "Assess React skills", 5, "Hooks, state management")

    assert "Interview Title: Frontend Screen" in prompt
    assert "Interview Objective: Assess React skills" in prompt
    assert "Create exactly 5 questions" in prompt
    assert "Hooks, state management" in prompt
    assert "'questions' and 'description'" in prompt


def test_behavioral_prompt_requests_star_questions():
    prompt = generate_behavioral_questions_prompt("Leadership", "Assess leadership", 4, "Senior engineer")

    assert "Create exactly 4 behavioral questions" in prompt
    assert "STAR method" in prompt
    assert "Senior engineer" in prompt


def test_prompt_example_is_literal_json():
    prompt = generate_questions_prompt("x", "y", 1, "z")

    assert '"questions": [' in prompt
    assert "{{" not in prompt


def test_build_messages():
    messages = build_messages(SYSTEM_PROMPT, "hello")

    assert messages == [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": "hello"},
    ]
