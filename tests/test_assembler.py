import pytest

from chatmock.assembler import CompletionAssembler, count_messages
from chatmock.config import Settings
from chatmock.errors import ChatMockError, EmptyMessagesError
from chatmock.models import ChatMessage, ChatRequest


def make_request(*contents: str) -> ChatRequest:
    return ChatRequest(
        model="gpt-test",
        messages=[ChatMessage(role="user", content=c) for c in contents],
    )


def test_completion_uses_configured_constants():
    settings = Settings(completion_model="mock-1", completion_tokens=7, reply_suffix="!")
    out = CompletionAssembler(settings, id_factory=lambda: "fixed").build_completion(make_request("a", "b"))

    assert out.id == "fixed"
    assert out.model == "mock-1"
    assert out.usage.prompt_tokens == 2
    assert out.usage.completion_tokens == 7
    assert out.usage.total_tokens == 9
    assert out.choices[0].message.content == "a!"


def test_custom_token_counter():
    def count_words(messages):
        return sum(len(m.content.split()) for m in messages)

    out = CompletionAssembler(Settings(), token_counter=count_words).build_completion(
        make_request("one two three", "four")
    )
    assert out.usage.prompt_tokens == 4
    assert out.usage.total_tokens == 104


def test_initial_fragment_has_no_choices():
    out = CompletionAssembler(Settings()).build_initial_fragment(make_request("x", "y", "z"))
    assert out.choices == []
    assert out.usage.prompt_tokens == 3
    assert out.usage.completion_tokens == 0
    assert out.usage.total_tokens == 3


@pytest.mark.parametrize("method", ["build_completion", "build_initial_fragment"])
def test_empty_messages_raise(method):
    assembler = CompletionAssembler(Settings())
    with pytest.raises(EmptyMessagesError) as excinfo:
        getattr(assembler, method)(ChatRequest())
    assert isinstance(excinfo.value, ChatMockError)


def test_stream_choice_keeps_index_zero():
    choices = [CompletionAssembler.build_stream_choice(i) for i in range(3)]
    assert [c.index for c in choices] == [0, 0, 0]
    assert choices[2].message.content == "Streamed response part 2"
    assert choices[2].logprobs is None


def test_count_messages():
    assert count_messages([]) == 0
    assert count_messages(make_request("a", "b").messages) == 2


def test_messages_are_immutable():
    message = ChatMessage(role="user", content="hi")
    with pytest.raises(Exception):
        message.content = "changed"


def test_null_request_fields_decode_to_zero_values():
    request = ChatRequest.model_validate_json(
        b'{"model": null, "messages": null, "temperature": null, "streaming": null}'
    )
    assert request.model == ""
    assert request.messages == []
    assert request.temperature == 0.0
    assert request.streaming is None
