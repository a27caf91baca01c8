import pytest

from genaikit.chat.chat_options import ChatOptions, ChatOptionsSet, ReasoningEffort
from genaikit.chat.response_format import JsonMode, JsonSpec
from genaikit.errors import ReasoningParsingError


@pytest.mark.parametrize("keyword", ["low", "medium", "high"])
def test_keyword_round_trip(keyword):
    effort = ReasoningEffort.from_keyword(keyword)
    assert effort.as_keyword() == keyword
    assert effort.variant_name() == keyword
    assert str(effort) == keyword
    assert ReasoningEffort.parse(keyword) == effort


def test_keyword_constants():
    assert ReasoningEffort.from_keyword("low") == ReasoningEffort.LOW
    assert ReasoningEffort.from_keyword("medium") == ReasoningEffort.MEDIUM
    assert ReasoningEffort.from_keyword("high") == ReasoningEffort.HIGH
    assert ReasoningEffort.from_keyword("budget") is None


def test_budget():
    effort = ReasoningEffort.budget(2048)
    assert effort.variant_name() == "budget"
    assert effort.as_keyword() is None
    assert str(effort) == str(2048)
    assert ReasoningEffort.parse(str(effort)) == effort


def test_budget_out_of_range():
    with pytest.raises(ValueError):
        ReasoningEffort.budget(-1)


def test_from_model_name():
    assert ReasoningEffort.from_model_name("o4-mini-low") == (ReasoningEffort.LOW, "o4-mini")
    assert ReasoningEffort.from_model_name("gpt-4o-mini") == (None, "gpt-4o-mini")
    assert ReasoningEffort.from_model_name("deepseek") == (None, "deepseek")


@pytest.mark.parametrize("text", ["abc", "-1", "", " 12", str(2**32)])
def test_parse_errors(text):
    with pytest.raises(ReasoningParsingError) as info:
        ReasoningEffort.parse(text)
    assert str(info.value) == f"Failed to parse reasoning. Actual: '{text}'"


def test_setters_return_new_options():
    base = ChatOptions()
    changed = base.with_temperature(0.0).with_max_tokens(100).with_stop_sequences(["London"])
    assert base.temperature is None
    assert changed.temperature == 0.0
    assert changed.max_tokens == 100
    assert changed.stop_sequences == ("London",)


def test_with_response_format_rejects_other():
    with pytest.raises(TypeError):
        ChatOptions().with_response_format("json")


def test_with_json_mode():
    with pytest.warns(DeprecationWarning):
        on = ChatOptions().with_json_mode(True)
    assert on.response_format == JsonMode()
    spec = JsonSpec("some-schema", {"type": "object"})
    with pytest.warns(DeprecationWarning):
        off = ChatOptions().with_response_format(spec).with_json_mode(False)
    assert off.response_format == spec


def test_cascade_prefers_chat():
    client = ChatOptions(temperature=0.5, capture_usage=True, max_tokens=100)
    chat = ChatOptions(temperature=0.0, capture_usage=False)
    options = ChatOptionsSet(client=client, chat=chat)
    assert options.temperature == 0.0
    assert options.capture_usage is False
    assert options.max_tokens == 100
    assert options.top_p is None


def test_cascade_builders():
    options = (
        ChatOptionsSet()
        .with_client_options(ChatOptions().with_reasoning_effort(ReasoningEffort.HIGH))
        .with_chat_options(None)
    )
    assert options.reasoning_effort == ReasoningEffort.HIGH
    assert ChatOptionsSet().capture_content is None


def test_stop_sequences_from_chat_even_if_empty():
    client = ChatOptions(stop_sequences=["London"])
    assert ChatOptionsSet(client=client, chat=ChatOptions()).stop_sequences == ()
    assert ChatOptionsSet(client=client).stop_sequences == ("London",)
    assert ChatOptionsSet().stop_sequences == ()


def test_json_mode_resolution():
    with pytest.warns(DeprecationWarning):
        assert ChatOptionsSet().json_mode is None
    with pytest.warns(DeprecationWarning):
        assert ChatOptionsSet(chat=ChatOptions(response_format=JsonMode())).json_mode is True
    spec = JsonSpec("some-schema", {})
    with pytest.warns(DeprecationWarning):
        assert ChatOptionsSet(client=ChatOptions(response_format=spec)).json_mode is False