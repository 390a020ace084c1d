import json
import re
from typing import Any

from pydantic import ValidationError

from logos.errors import ExtractionError, ParseError, SchemaError
from logos.models import AnalysisResult
from logos.services.providers import ProviderReply

JSON_SPAN = re.compile(r"\{.*\}", re.DOTALL)


def isolate_json(raw_text: str, provider: str) -> str:
    """Cut the first '{' through the last '}' out of text that may carry prose around it."""
    json_match = JSON_SPAN.search(raw_text)
    if not json_match:
        raise ExtractionError(f"Could not extract JSON from {provider} response")
    return json_match.group(0)


def parse_json(span: str, provider: str) -> Any:
    try:
        return json.loads(span)
    except json.JSONDecodeError as e:
        raise ParseError(f"Failed to parse JSON response from {provider}. Please try again.") from e


def validate_result(data: Any, provider: str) -> AnalysisResult:
    if not isinstance(data, dict):
        raise SchemaError(f"Invalid response format from {provider}. Please try again.")
    try:
        return AnalysisResult.model_validate(data)
    except ValidationError as e:
        raise SchemaError(f"Invalid response format from {provider}. Please try again.") from e


def normalize(reply: ProviderReply) -> AnalysisResult:
    """Turn a provider reply into the canonical result, raising the first failure met."""
    if not reply.ok:
        raise reply.error
    span = isolate_json(reply.text, reply.provider)
    data = parse_json(span, reply.provider)
    return validate_result(data, reply.provider)
