#!/usr/bin/env python3
"""
Send one chat completion to a running mock server with the official OpenAI SDK.

Usage:
    chatmock --port 8000 &
    python scripts/openai_smoke.py --base-url http://127.0.0.1:8000
"""

import click
from openai import OpenAI


@click.command()
@click.option(
    '--base-url',
    default='http://127.0.0.1:8000',
    show_default=True,
    help='Root URL of the mock server'
)
@click.option(
    '--message',
    default='Who are you? ',
    show_default=True,
    help='User message to send'
)
def main(base_url: str, message: str):
    """Print the mock server's reply and usage."""
    client = OpenAI(
        api_key="sk-mock",  # ignored by the mock
        base_url=base_url
    )

    response = client.chat.completions.create(
        model="gpt-3.5-turbo",
        messages=[
            {"role": "user", "content": message}
        ],
    )

    click.echo(f"id:    {response.id}")
    click.echo(f"reply: {response.choices[0].message.content}")
    click.echo(f"usage: {response.usage}")


if __name__ == '__main__':
    main()
