import httpx
import pytest

from models.api_models import ChatRequest, ChatResponse
from models.chat_models import CompletionRequest, PromptContext, SearchOutcome, SearchResult
from services.chat_service import ChatService
from tests.helpers import assert_no_web_context
from utils.constants import PERSONA_SYSTEM_PROMPT, WEB_CONTEXT_HEADING


@pytest.fixture
def chat_service(test_config, patched_clients):
    return ChatService(test_config)


@pytest.mark.anyio
async def test_reply_without_web_search_never_calls_search(chat_service, search_client, completion_client):
    """Given includeWebSearch=false, when reply is called, the search provider should never be contacted."""
    response = await chat_service.reply(ChatRequest(message="What is inflation?", includeWebSearch=False))

    assert response == ChatResponse(response="Inflation is...")
    assert search_client.calls == []
    assert completion_client.system_prompt() == PERSONA_SYSTEM_PROMPT


@pytest.mark.anyio
async def test_reply_with_web_search_injects_three_results_in_order(chat_service, completion_client):
    """Given search results, when reply is called, the prompt should carry exactly the top three in order."""
    await chat_service.reply(ChatRequest(message="What is inflation?", includeWebSearch=True))

    system_prompt = completion_client.system_prompt()
    assert system_prompt.startswith(PERSONA_SYSTEM_PROMPT)
    assert WEB_CONTEXT_HEADING in system_prompt

    first = system_prompt.index("1. Inflation: What It Is")
    second = system_prompt.index("2. Consumer Price Index Summary")
    third = system_prompt.index("3. Inflation - Wikipedia")
    assert first < second < third
    assert "Source: https://en.wikipedia.org/wiki/Inflation" in system_prompt
    assert "Fourth Result That Should Be Dropped" not in system_prompt


@pytest.mark.anyio
async def test_reply_with_failed_search_omits_web_context(chat_service, search_client, completion_client):
    """Given a failing search provider, when reply is called, it should still answer without web context."""
    search_client.response = httpx.Response(500)

    response = await chat_service.reply(ChatRequest(message="What is inflation?", includeWebSearch=True))

    assert response.response == "Inflation is..."
    assert len(search_client.calls) == 1
    assert_no_web_context(completion_client.system_prompt())


@pytest.mark.anyio
async def test_reply_with_empty_search_results_omits_web_context(chat_service, search_client, completion_client):
    search_client.response = httpx.Response(200, json={"web": {"results": []}})

    await chat_service.reply(ChatRequest(message="obscure", includeWebSearch=True))

    assert_no_web_context(completion_client.system_prompt())


@pytest.mark.anyio
async def test_reply_is_deterministic_for_the_same_request(chat_service, completion_client):
    """Given the same request twice, when reply is called, it should produce identical results and payloads."""
    request = ChatRequest(message="What is inflation?", includeWebSearch=True)

    first = await chat_service.reply(request)
    second = await chat_service.reply(request)

    assert first == second
    assert completion_client.calls[0]["json"] == completion_client.calls[1]["json"]


def test_prompt_context_renders_persona_only_without_block():
    assert PromptContext().render() == PERSONA_SYSTEM_PROMPT
    assert PromptContext(web_search_block="").render() == PERSONA_SYSTEM_PROMPT


def test_prompt_context_appends_heading_and_block():
    rendered = PromptContext(web_search_block="\n\nCurrent web search results:\n1. x").render()
    assert rendered == (
        PERSONA_SYSTEM_PROMPT
        + "\n\nAdditional Context from Current Web Research:"
        + "\n\nCurrent web search results:\n1. x"
    )


def test_completion_request_has_system_then_user_turn():
    request = CompletionRequest.build(
        prompt=PromptContext(), message="hi", model="m", max_tokens=10, temperature=0.5
    )
    assert request.to_payload() == {
        "model": "m",
        "messages": [
            {"role": "system", "content": PERSONA_SYSTEM_PROMPT},
            {"role": "user", "content": "hi"},
        ],
        "max_tokens": 10,
        "temperature": 0.5,
    }


def test_search_outcome_or_empty_degrades_on_error():
    result = SearchResult(title="t", description="d", url="u")
    assert SearchOutcome(results=[result]).or_empty() == [result]
    assert SearchOutcome.failure("boom").or_empty() == []
