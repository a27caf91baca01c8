import pytest
from dataclasses import FrozenInstanceError

from genaikit.chat.tool import Tool, ToolCall, ToolResponse

WEATHER_SCHEMA = {
    "type": "object",
    "properties": {
        "city": {"type": "string", "description": "The city name"},
        "country": {"type": "string", "description": "The most likely country of this city name"},
        "unit": {
            "type": "string",
            "enum": ["C", "F"],
            "description": "The temperature unit of the country. C for Celsius, and F for Fahrenheit",
        },
    },
    "required": ["city", "country", "unit"],
}


def test_new_tool_has_no_description_or_schema():
    tool = Tool("get_weather")
    assert tool.name == "get_weather"
    assert tool.description is None
    assert tool.schema is None


def test_with_schema_sets_schema_and_keeps_original():
    tool = Tool("get_weather")
    with_schema = tool.with_schema(WEATHER_SCHEMA)
    assert with_schema.schema == WEATHER_SCHEMA
    assert with_schema.name == "get_weather"
    assert tool.schema is None


def test_with_description_chains():
    tool = Tool("get_weather").with_description("Get the weather").with_schema(WEATHER_SCHEMA)
    assert tool.description == "Get the weather"
    assert tool.schema["required"] == ["city", "country", "unit"]


def test_tool_call_fields():
    call = ToolCall(call_id="call_1", fn_name="get_weather", fn_arguments={"city": "Paris"})
    assert call.fn_arguments["city"] == "Paris"
    assert call.fn_name == "get_weather"


def test_tool_response_fields_and_equality():
    content = '{"weather": "Sunny", "temperature": "32C"}'
    response = ToolResponse("call_1", content)
    assert response.call_id == "call_1"
    assert response.content == content
    assert response == ToolResponse("call_1", content)


def test_tool_is_immutable():
    tool = Tool("get_weather")
    with pytest.raises(FrozenInstanceError):
        tool.name = "other"
    assert tool.name == "get_weather"