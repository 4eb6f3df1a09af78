"""Tests for the code optimization endpoint."""

from typing import get_args

import pytest

from codequality.analyzers.optimization_analyzer import OPTIMIZATION_TYPES
from codequality.schemas.optimization import OptimizationRequest


class TestCodeOptimizationValidation:
    """Test request validation."""

    def test_request_type_matches_engine_types(self):
        """The request literal and the engine share one list of types."""
        annotation = OptimizationRequest.model_fields["optimization_type"].annotation
        assert get_args(annotation) == OPTIMIZATION_TYPES
        assert OPTIMIZATION_TYPES == ("performance", "readability", "security", "all")

    def test_missing_optimization_type(self, client):
        """optimization_type is required."""
        response = client.post(
            "/api/code-optimization",
            json={"code": "x", "language": "javascript"},
        )

        assert response.status_code == 400
        assert "optimization_type" in response.json()["error"]

    def test_invalid_optimization_type(self, client):
        """Only the four known types are accepted."""
        response = client.post(
            "/api/code-optimization",
            json={"code": "x", "language": "javascript", "optimization_type": "speed"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert "Invalid value" in body["error"]


class TestCodeOptimization:
    """Test successful optimization."""

    def test_eval_security(self, client):
        """eval() is reported but not rewritten."""
        response = client.post(
            "/api/code-optimization",
            json={
                "code": "eval(userInput)",
                "language": "javascript",
                "optimization_type": "security",
            },
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert len(data["suggestions"]) == 1
        suggestion = data["suggestions"][0]
        assert suggestion["category"] == "security"
        assert suggestion["impact"] == "high"
        assert suggestion["applied"] is False
        assert data["optimized_code"] == "eval(userInput)"
        assert data["summary"]["security_improvements_count"] == 1

    @pytest.mark.parametrize("optimization_type", OPTIMIZATION_TYPES)
    def test_every_type_accepted(self, client, optimization_type):
        """Every type the engine knows is accepted by the API."""
        response = client.post(
            "/api/code-optimization",
            json={
                "code": "const total = 1;",
                "language": "javascript",
                "optimization_type": optimization_type,
            },
        )
        assert response.status_code == 200

    def test_preserve_comments_false(self, client):
        """Comments can be stripped from the output."""
        response = client.post(
            "/api/code-optimization",
            json={
                "code": "// explain things\nrun();",
                "language": "javascript",
                "optimization_type": "security",
                "preserve_comments": False,
            },
        )

        assert response.json()["data"]["optimized_code"] == "run();"
