# genaikit

Provider-neutral building blocks for generative AI chat services. It lets you
describe a chat request once (system prompts, messages, images, tools and
options), resolve authentication and model names, make JSON web calls with
`httpx`, split streamed HTTP bodies into messages, and consume streamed chat
events.

## Install

```
pip install genaikit
```

To run the test suite:

```
pip install "genaikit[test]"
pytest
```

## Building a request

```python
from genaikit.chat.chat_message import ChatMessage
from genaikit.chat.chat_request import ChatRequest
from genaikit.chat.tool import Tool

req = (
    ChatRequest.from_messages([
        ChatMessage.system("Be very concise"),
        ChatMessage.system("Explain with bullet points"),
        ChatMessage.user("Why is the sky blue?"),
    ])
    .with_system("And end with 'Thank you'")
    .append_tool(
        Tool("get_weather")
        .with_description("Current weather for a city")
        .with_schema({"type": "object", "properties": {"city": {"type": "string"}}})
    )
)

print(req.combine_systems())
# And end with 'Thank you'
#
# Be very concise
#
# Explain with bullet points
```

`ChatRequest` is immutable: `with_system`, `append_message`, `append_messages`,
`with_tools` and `append_tool` return a new request. `iter_systems()` yields
the request's own `system` text and then the text of every system message;
`combine_systems()` joins them with an empty line between them and returns
`None` when there is no system content. System messages whose content is not
text are left out.

A message's content is a `MessageContent` of one of four kinds
(`MessageContentKind`): text, content parts, tool calls or tool responses.
`ChatMessage.user`, `system` and `assistant` accept text, a list of
`ContentPart` items (or strings), a list of `ToolCall` items or a
`ToolResponse`:

```python
from genaikit.chat.message_content import ContentPart

msg = ChatMessage.user([
    ContentPart.from_text("What is in this picture?"),
    ContentPart.from_image_url("image/jpeg", "https://example.com/duck.jpg"),
])
```

Images can also be given as base64 text with `ContentPart.from_image_base64`.
`append_message` also takes a list of tool calls (which becomes an assistant
message) or a `ToolResponse` (which becomes a tool message), so a tool round
trip reads:

```python
from genaikit.chat.tool import ToolResponse

req = req.append_message(tool_calls).append_message(
    ToolResponse(tool_calls[0].call_id, '{"weather": "Sunny"}')
)
```

`ChatMessage.with_options(CacheControl.EPHEMERAL)` attaches cache control to a
message.

## Options

```python
from genaikit.chat.chat_options import ChatOptions, ChatOptionsSet, ReasoningEffort
from genaikit.chat.response_format import JsonMode, JsonSpec

options = (
    ChatOptions()
    .with_temperature(0.0)
    .with_stop_sequences(["London"])
    .with_capture_usage(True)
    .with_response_format(JsonSpec("some-schema", {"type": "object"}))
)

effort, model = ReasoningEffort.from_model_name("o4-mini-low")  # ReasoningEffort.LOW, "o4-mini"
budget = ReasoningEffort.parse("1024")                           # ReasoningEffort.budget(1024)
```

`ReasoningEffort` is one of `LOW`, `MEDIUM`, `HIGH` or a token budget;
`ReasoningEffort.parse` raises `ReasoningParsingError` for anything else.
`with_json_mode` is deprecated in favour of `with_response_format(JsonMode())`.

`ChatOptionsSet` layers call options over client-wide defaults: each property
takes the value set on the call options, otherwise the default one.

```python
resolved = ChatOptionsSet().with_client_options(defaults).with_chat_options(options)
resolved.temperature
```

## Responses and usage

`ChatResponse` holds the content, the reasoning content, the model used
(`model_iden`), the model the provider reported (`provider_model_iden`) and a
`Usage`. `content_text()` returns the text content or `None`; `tool_calls()`
returns the list of tool calls or `None`.

`Usage.from_dict` reads an OpenAI-style usage object. Zero values in the token
detail sections are read as absent (`zero_as_none`), `to_dict` returns only
the fields that are set, and `compact_details()` drops detail sections that
hold nothing:

```python
from genaikit.chat.usage import Usage

usage = Usage.from_dict({"prompt_tokens": 10, "completion_tokens_details": {"reasoning_tokens": 0}})
usage.compact_details()
usage.to_dict()  # {"prompt_tokens": 10}
```

## Model identifiers

`ModelIden(adapter_kind, model_name)` pairs an adapter kind with a
`ModelName`. `from_name` returns the same identifier when the name is
unchanged and a new one otherwise.

## Resolvers

```python
from genaikit.resolver.auth_data import AuthData
from genaikit.resolver.auth_resolver import AuthResolver

auth = AuthResolver.from_resolver_fn(lambda model_iden: AuthData.from_single("placeholder"))
auth_data = await auth.resolve(model_iden)
```

`AuthData.from_env("OPENAI_API_KEY")` reads the key from the environment when
`single_key_value()` is called and raises `ApiKeyEnvNotFound` if it is unset;
a `RequestOverride` gives an empty key and `MultiKeys` raises
`ResolverAuthDataNotSingleValue`. The `repr` of every `AuthData` hides its
values.

`ModelMapper.map_model` rewrites a model identifier, and
`ServiceTargetResolver.resolve` rewrites a whole `ServiceTarget` (endpoint,
auth and model). `AuthResolver` and `ServiceTargetResolver` accept plain
functions (`from_resolver_fn`) or coroutine functions
(`from_resolver_async_fn`); their `resolve` methods are coroutines.

## Web calls and streams

```python
from genaikit.webc.web_client import WebClient
from genaikit.webc.web_stream import WebStream

async with WebClient() as client:
    res = await client.do_post(url, [("authorization", "Bearer token")], {"q": 1})
    res.status, res.body

    request = client.build_post_request(url, [], {"stream": True})
    async for message in WebStream.with_delimiter(client, request, "\n"):
        ...
```

`WebClient.do_get` and `do_post` return a `WebResponse` with the status and
decoded JSON body. A non-success status raises `ResponseFailedStatus`, a
non-JSON content type raises `ResponseFailedNotJson`, and transport failures
raise `WebcError`.

`WebStream` sends the request when iteration starts and yields string
messages, split either at a delimiter (`with_delimiter`) or as the items of a
pretty-printed JSON array (`with_pretty_json_array`). The splitting rules are
available on their own as `process_delimited` and `process_pretty_json_array`.

## Chat streams

`ChatStream` wraps any async iterable of chat events (`StreamStart`,
`StreamChunk`, `ReasoningChunk`, `StreamEnd`) and yields them, raising
`TypeError` for anything else. `print_chat_stream` writes the chunks to an
output as they arrive and returns the concatenated text:

```python
from genaikit.chat.chat_response import ChatStreamResponse
from genaikit.chat.chat_stream import ChatStream, StreamChunk, StreamEnd, StreamStart
from genaikit.chat.printer import PrintChatStreamOptions, print_chat_stream
from genaikit.model_iden import ModelIden

async def events():
    yield StreamStart()
    yield StreamChunk("Hello ")
    yield StreamChunk("world")
    yield StreamEnd(captured_content="Hello world")

res = ChatStreamResponse(ChatStream(events()), ModelIden("demo", "demo-model"))
text = await print_chat_stream(res, PrintChatStreamOptions.from_print_events(True))
```

Printing stops quietly at the first error the stream raises.

## What the package does not do

There is no ready-made client that sends a `ChatRequest` to a provider: the
package has no provider adapters, so it does not build provider-specific
request payloads, parse provider replies into `ChatResponse`, turn provider
streams into chat events, supply default endpoints or keys per provider, or
list a provider's models. It offers the data types, resolvers, web client and
stream splitting to build such a client on.

## Errors

Failures specific to the package derive from `GenaiError` (`genaikit.errors`),
`ResolverError` (`genaikit.resolver.errors`) or `WebcError`
(`genaikit.webc.errors`). Invalid arguments to constructors and setters raise
`ValueError` or `TypeError`.