"""
Tests for request logging helpers
"""

from socialnet.middleware import operation_name_from_payload, sanitize_query_params


def test_sanitize_query_params_redacts_sensitive_keys():
    params = {"password": "secret", "Session_ID": "abc", "page": "2"}

    assert sanitize_query_params(params) == {
        "password": "[REDACTED]",
        "Session_ID": "[REDACTED]",
        "page": "2",
    }


def test_operation_name_prefers_explicit_name():
    assert operation_name_from_payload({"operationName": "Feed", "query": "query X { a }"}) == "Feed"


def test_operation_name_parsed_from_query():
    assert operation_name_from_payload({"query": "query Users { users { id } }"}) == "Users"
    assert (
        operation_name_from_payload({"query": "mutation CreateUser { createUser { id } }"})
        == "mutation:CreateUser"
    )


def test_operation_name_for_anonymous_and_introspection():
    assert operation_name_from_payload({"query": "{ users { id } }"}) == "unnamed_operation"
    assert operation_name_from_payload({"query": "{ __schema { types { name } } }"}) == "__introspection"
    assert operation_name_from_payload({}) is None
