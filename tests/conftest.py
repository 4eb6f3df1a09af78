"""Pytest configuration and fixtures."""

import itertools
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

# Five lines with nothing for any review rule to report
SAMPLE_JS_CLEAN = """const greeting = "hello";
const target = "world";
const message = greeting + target;
render(message);
export { message };
"""

SAMPLE_JS_CONSOLE = "function foo(){ console.log('x') }"

SAMPLE_JS_LONG_SIGNATURE = (
    "function processUserRegistrationRequest(username, password, email, address, phone, referralCode) {"
)

SAMPLE_JS_COMPLEX_CONDITION = (
    "if (userIsAuthenticated && userHasPermission && resourceIsAvailable) {"
)

SAMPLE_JS_UNHANDLED_ERROR = """try {
  run();
} catch (err) {
  cleanup();
}
"""

SAMPLE_JS_LOGGED_ERROR = """try {
  run();
} catch (err) {
  console.error(err);
}
"""

SAMPLE_JS_MIXED_INDENT = "function demo() {\n\treturn compute();\n  }\n\n\n\nexport default demo;\n"

FIXED_TIME = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


def long_function(body_lines: int) -> str:
    """A function whose body has ``body_lines`` lines."""
    body = ["  step();"] * body_lines
    return "\n".join(["function big() {", *body, "}"])


@pytest.fixture
def sample_js_clean():
    """Clean five-line snippet."""
    return SAMPLE_JS_CLEAN


@pytest.fixture
def sample_js_console():
    """Single line with a console call."""
    return SAMPLE_JS_CONSOLE


@pytest.fixture
def sequential_ids():
    """Deterministic id factory."""
    counter = itertools.count(1)
    return lambda prefix: f"{prefix}-{next(counter)}"


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_TIME


@pytest.fixture
def client():
    """Create test client for the API."""
    from codequality.main import app

    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
