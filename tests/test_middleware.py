"""
Tests for logging middleware helpers
"""

import pytest
from structlog.contextvars import get_contextvars

from postboard.logging import bind_request, unbind_request
from postboard.middleware import operation_name_from_query, sanitize_query_params


class TestSanitizeQueryParams:
    def test_redacts_sensitive_keys(self):
        params = {"password": "hunter2", "X-Api_Key": "k", "page": "2"}

        assert sanitize_query_params(params) == {
            "password": "[REDACTED]",
            "X-Api_Key": "[REDACTED]",
            "page": "2",
        }


class TestOperationName:
    @pytest.mark.parametrize(
        "query,expected",
        [
            ("query Lookup { users { id } }", "Lookup"),
            ("mutation Register($i: CreateUserInput!) { createUser(input: $i) { id } }",
             "mutation:Register"),
            ("{ users { id } }", "unnamed_operation"),
            ("query IntrospectionQuery { __schema { types { name } } }", "__introspection"),
            ("", None),
        ],
    )
    def test_operation_name_from_query(self, query, expected):
        assert operation_name_from_query(query) == expected


class TestRequestContext:
    def test_bind_and_unbind(self):
        request_id = bind_request(request_id="abc", operation="Lookup")

        assert request_id == "abc"
        assert get_contextvars() == {"request_id": "abc", "graphql_operation": "Lookup"}

        unbind_request()
        assert get_contextvars() == {}

    def test_generated_ids_are_unique(self):
        ids = set()
        for _ in range(100):
            ids.add(bind_request())
            unbind_request()

        assert len(ids) == 100
