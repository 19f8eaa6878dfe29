from ._endpoint import Endpoint, resolve_path
from ._expectations import (
    Expectation,
    JsonBody,
    NoBody,
    TextBody,
    expect_json,
    expect_no_content,
    expect_text,
)
from ._logs import mask_headers, setup_logging
from ._query import comma_separated, query_items, serialize_query
from ._request_spec import RequestSpec, ResolvedRequest
from ._response import extract_error_message, interpret_response
from ._user_agent import user_agent_value

__all__ = [
    "Endpoint",
    "Expectation",
    "JsonBody",
    "NoBody",
    "RequestSpec",
    "ResolvedRequest",
    "TextBody",
    "comma_separated",
    "expect_json",
    "expect_no_content",
    "expect_text",
    "extract_error_message",
    "interpret_response",
    "mask_headers",
    "query_items",
    "resolve_path",
    "serialize_query",
    "setup_logging",
    "user_agent_value",
]
