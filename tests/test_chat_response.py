import pytest

from genaikit.chat.chat_response import ChatResponse, ChatStreamResponse
from genaikit.chat.chat_stream import ChatStream, StreamChunk
from genaikit.chat.message_content import ContentPart, MessageContent
from genaikit.chat.tool import ToolCall
from genaikit.chat.usage import Usage
from genaikit.model_iden import ModelIden

MODEL = ModelIden("OpenAI", "gpt-4o-mini")


def _response(content):
    return ChatResponse(model_iden=MODEL, provider_model_iden=MODEL, content=content)


async def _hi_events():
    yield StreamChunk("Hi")


def test_content_text():
    response = _response(MessageContent.from_text("Paris"))
    assert response.content_text() == "Paris"
    assert response.tool_calls() is None


def test_content_text_missing_or_parts():
    assert _response(None).content_text() is None
    parts = MessageContent.from_parts([ContentPart.from_text("a")])
    assert _response(parts).content_text() is None


def test_tool_calls():
    call = ToolCall("call-1", "get_weather", {"city": "Paris", "country": "France"})
    response = _response(MessageContent.from_tool_calls([call]))
    calls = response.tool_calls()
    assert calls == [call]
    assert calls[0].fn_arguments["city"] == "Paris"
    assert response.content_text() is None


def test_defaults():
    response = _response(None)
    assert response.usage == Usage()
    assert response.reasoning_content is None


@pytest.mark.asyncio
async def test_stream_response_holds_stream():
    response = ChatStreamResponse(stream=ChatStream(_hi_events()), model_iden=MODEL)
    received = [event async for event in response.stream]
    assert received == [StreamChunk("Hi")]
    assert response.model_iden.model_name == "gpt-4o-mini"