import pytest

from genaikit.chat.chat_message import CacheControl, ChatMessage, ChatRole, MessageOptions
from genaikit.chat.message_content import MessageContent, MessageContentKind
from genaikit.chat.tool import ToolCall, ToolResponse


@pytest.mark.parametrize(
    "factory, role",
    [
        (ChatMessage.system, ChatRole.SYSTEM),
        (ChatMessage.user, ChatRole.USER),
        (ChatMessage.assistant, ChatRole.ASSISTANT),
    ],
)
def test_role_constructors(factory, role):
    message = factory("Answer in one sentence")
    assert message.role is role
    assert message.content.text_as_str() == "Answer in one sentence"
    assert message.options is None


def test_role_display_matches_variant_name():
    assert str(ChatMessage.user("hi").role) == "User"
    tool_message = ChatMessage.from_tool_response(ToolResponse("call_1", "sunny"))
    assert str(tool_message.role) == "Tool"


def test_from_tool_calls_is_assistant():
    calls = [ToolCall("call_1", "get_weather", {"city": "Paris"})]
    message = ChatMessage.from_tool_calls(calls)
    assert message.role is ChatRole.ASSISTANT
    assert message.content.kind is MessageContentKind.TOOL_CALLS
    assert message.content.value == tuple(calls)


def test_from_tool_response_is_tool():
    response = ToolResponse("call_1", "sunny")
    message = ChatMessage.from_tool_response(response)
    assert message.role is ChatRole.TOOL
    assert message.content == MessageContent.from_tool_responses([response])


def test_coerce_variants():
    response = ToolResponse("call_1", "sunny")
    calls = [ToolCall("call_1", "f", {})]
    assert ChatMessage.coerce(response) == ChatMessage.from_tool_response(response)
    assert ChatMessage.coerce(calls) == ChatMessage.from_tool_calls(calls)
    message = ChatMessage.user("hi")
    assert ChatMessage.coerce(message) is message


def test_coerce_rejects_plain_string():
    with pytest.raises(TypeError):
        ChatMessage.coerce("hi")


def test_with_options_from_cache_control():
    message = ChatMessage.user("big content").with_options(CacheControl.EPHEMERAL)
    assert message.options == MessageOptions(cache_control=CacheControl.EPHEMERAL)
    assert message.content.text_as_str() == "big content"


def test_with_options_keeps_original():
    original = ChatMessage.system("x")
    changed = original.with_options(MessageOptions())
    assert original.options is None
    assert changed.options == MessageOptions()


def test_with_options_rejects_other_types():
    with pytest.raises(TypeError):
        ChatMessage.user("x").with_options("ephemeral")