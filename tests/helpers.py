from utils.constants import CORS_HEADERS, WEB_CONTEXT_HEADING


def assert_cors_headers(response):
    """Assert the CORS headers browser clients rely on are present."""
    for name, value in CORS_HEADERS.items():
        assert response.headers.get(name) == value, f"Header {name!r} missing or wrong: {response.headers.get(name)!r}"


def assert_error_envelope(response, status_code, error, details=None):
    """Assert an {error, details} body with the given status."""
    assert response.status_code == status_code
    payload = response.json()
    assert set(payload) == {"error", "details"}
    assert payload["error"] == error
    if details is not None:
        assert payload["details"] == details


def assert_no_web_context(system_prompt):
    """Assert the prompt carries no web research section."""
    assert WEB_CONTEXT_HEADING.strip() not in system_prompt, "Unexpected web research section in system prompt"
