OPENAI_TEST_KEY = "sk-test-secret-0123456789"
BRAVE_TEST_KEY = "brave-test-key"

MOCK_BRAVE_SEARCH_API_RESPONSE = {
    "web": {
        "results": [
            {
                "title": "Inflation: What It Is and How to Control Inflation Rates",
                "url": "https://www.investopedia.com/terms/i/inflation.asp",
                "description": "Inflation is the rate at which the general level of prices for goods and services is rising.",
                "page_age": "2025-11-20T12:00:00Z",
            },
            {
                "title": "Consumer Price Index Summary",
                "url": "https://www.bls.gov/news.release/cpi.nr0.htm",
                "description": "The Consumer Price Index for All Urban Consumers rose 0.3 percent last month.",
            },
            {
                "title": "Inflation - Wikipedia",
                "url": "https://en.wikipedia.org/wiki/Inflation",
                "description": "In economics, inflation is an increase in the average price of goods and services.",
            },
            {
                "title": "Fourth Result That Should Be Dropped",
                "url": "https://example.com/fourth",
                "description": "Only the top three results reach the prompt.",
            },
        ]
    }
}


def openai_completion(content: str) -> dict:
    """OpenAI chat completions response carrying a single choice."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "model": "gpt-4o-mini",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


def openai_error(message: str, error_type: str = "invalid_request_error") -> dict:
    """OpenAI error envelope."""
    return {"error": {"message": message, "type": error_type, "code": None}}
