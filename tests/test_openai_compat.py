from openai import OpenAI

SUFFIX = "Hello, how can I help you today?"


def test_openai_sdk_parses_completion(client):
    sdk = OpenAI(api_key="sk-mock", base_url="http://testserver", http_client=client, max_retries=0)

    response = sdk.chat.completions.create(
        model="gpt-3.5-turbo",
        messages=[
            {"role": "system", "content": "You are a helpful assistant. "},
            {"role": "user", "content": "Who are you?"},
        ],
    )

    assert response.id.startswith("chat.completion-")
    assert response.object == "chat.completion"
    assert response.choices[0].message.role == "assistant"
    assert response.choices[0].message.content == "You are a helpful assistant. " + SUFFIX
    assert response.choices[0].finish_reason == "stop"
    assert response.usage.prompt_tokens == 2
    assert response.usage.total_tokens == 102
