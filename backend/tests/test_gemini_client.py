"""Tests for the Gemini wrapper and reply parsing."""

import pytest

from services.gemini_client import (
    extract_json_object,
    generate_json,
    generate_text,
    is_ai_available,
)


def test_is_ai_available():
    assert is_ai_available("secret-key") is True
    assert is_ai_available("") is False
    assert is_ai_available("   ") is False
    assert is_ai_available(None) is False


def test_extract_json_object_plain():
    assert extract_json_object('{"skills": ["Python"]}') == {"skills": ["Python"]}


def test_extract_json_object_code_fence():
    reply = '```json\n{"experienceLevel": "advanced"}\n```'
    assert extract_json_object(reply) == {"experienceLevel": "advanced"}


def test_extract_json_object_surrounded_by_prose():
    reply = 'Sure! {"summary": "brace } inside", "nested": {"n": 2}} Hope this helps {'
    parsed = extract_json_object(reply)
    assert parsed == {"summary": "brace } inside", "nested": {"n": 2}}


def test_extract_json_object_skips_malformed_candidate():
    reply = "{not json} and then {\"ok\": true}"
    assert extract_json_object(reply) == {"ok": True}


def test_extract_json_object_escaped_quotes():
    reply = '{"summary": "says \\"hi\\" {"}'
    assert extract_json_object(reply) == {"summary": 'says "hi" {'}


@pytest.mark.parametrize("reply", ["", "no json here", "[1, 2, 3]", "{unterminated"])
def test_extract_json_object_none(reply):
    assert extract_json_object(reply) is None


@pytest.mark.asyncio
async def test_generate_text_without_client():
    assert await generate_text(None, "prompt", "gemini-2.5-flash") is None


@pytest.mark.asyncio
async def test_generate_text_returns_reply(gemini_client_factory):
    client = gemini_client_factory("  hello  ")
    assert await generate_text(client, "prompt", "gemini-2.5-flash") == "hello"
    kwargs = client.aio.models.generate_content.call_args.kwargs
    assert kwargs["model"] == "gemini-2.5-flash"
    assert kwargs["contents"] == "prompt"


@pytest.mark.asyncio
async def test_generate_text_swallows_service_errors(gemini_client_factory):
    client = gemini_client_factory(error=TimeoutError("deadline exceeded"))
    assert await generate_text(client, "prompt", "gemini-2.5-flash") is None


@pytest.mark.asyncio
async def test_generate_text_empty_reply(gemini_client_factory):
    client = gemini_client_factory(None)
    assert await generate_text(client, "prompt", "gemini-2.5-flash") is None


@pytest.mark.asyncio
async def test_generate_json(gemini_client_factory):
    client = gemini_client_factory('Here you go: {"a": 1}')
    assert await generate_json(client, "prompt", "gemini-2.5-flash") == {"a": 1}


@pytest.mark.asyncio
async def test_generate_json_no_object(gemini_client_factory):
    client = gemini_client_factory("I cannot help with that.")
    assert await generate_json(client, "prompt", "gemini-2.5-flash") is None
