"""Provider adapters: build the wire request, make the call, pull out the completion text.

Every adapter returns a ProviderReply, success or failure, so the normalizer never
has to know which vendor answered or how it reports errors.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import requests
from openai import APIError, APIStatusError, OpenAI

from logos.config import Settings
from logos.errors import AnalysisError, ConfigurationError, EmptyContentError, TransportError
from logos.models import Provider
from logos.services.prompts import LOGOS_SYSTEM_PROMPT

OPENAI_MODEL = "gpt-4o"
GEMINI_MODEL = "gemini-2.0-flash"
GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"

# Suggestions for the UI picker; any OpenRouter model id is accepted.
OPENROUTER_MODELS = [
    "deepseek/deepseek-chat",
    "anthropic/claude-3.5-sonnet",
    "meta-llama/llama-3.3-70b-instruct",
    "mistralai/mistral-large",
    "google/gemma-3-27b-it",
]
DEFAULT_OPENROUTER_MODEL = OPENROUTER_MODELS[0]


@dataclass(frozen=True)
class ProviderReply:
    """Outcome of one provider call: completion text or the error that stopped it."""

    provider: str
    model: str
    text: Optional[str] = None
    error: Optional[AnalysisError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _first(items: Any) -> Any:
    if isinstance(items, list) and items:
        return items[0]
    return None


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _chat_completion_text(payload: Any) -> Optional[str]:
    choice = _as_dict(_first(_as_dict(payload).get("choices")))
    content = _as_dict(choice.get("message")).get("content")
    return content if isinstance(content, str) else None


def _http_error_message(response: requests.Response) -> str:
    try:
        message = _as_dict(_as_dict(response.json()).get("error")).get("message")
    except ValueError:
        message = None
    return message or f"{response.status_code} {response.reason}"


class ProviderAdapter:
    name: Provider
    label: str
    default_model: str

    def __init__(self, settings: Settings):
        self._settings = settings

    def resolve_model(self, variant: Optional[str] = None) -> str:
        return self.default_model

    def dispatch(self, text: str, variant: Optional[str] = None) -> ProviderReply:
        model = self.resolve_model(variant)
        env_var, api_key = self._settings.credential_for(self.name.value)
        if not api_key:
            error = ConfigurationError(
                f"{env_var} is missing. Add it to your environment or .env file."
            )
            return ProviderReply(self.label, model, error=error)

        try:
            payload = self.send(api_key, model, text)
        except TransportError as e:
            return ProviderReply(self.label, model, error=e)

        content = self.extract_text(payload)
        if not content or not content.strip():
            error = EmptyContentError(f"{self.label} returned an empty response")
            return ProviderReply(self.label, model, error=error)
        return ProviderReply(self.label, model, text=content)

    def send(self, api_key: str, model: str, text: str) -> Any:
        raise NotImplementedError

    def extract_text(self, payload: Any) -> Optional[str]:
        """Locate the completion text in the provider envelope, or None if absent."""
        raise NotImplementedError


class HTTPProviderAdapter(ProviderAdapter):
    """Adapter that talks to its provider with a plain JSON POST."""

    def __init__(self, settings: Settings, http: Any = None):
        super().__init__(settings)
        self._http = http or requests

    def post(self, url: str, **kwargs) -> Any:
        try:
            response = self._http.post(url, timeout=self._settings.request_timeout, **kwargs)
        except requests.RequestException as e:
            # Exception text can echo the request URL, so only the class name is surfaced
            raise TransportError(f"{self.label} API error: {type(e).__name__}") from e

        if not response.ok:
            raise TransportError(f"{self.label} API error: {_http_error_message(response)}")
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"{self.label} API error: response body is not JSON") from e


class OpenAIAdapter(ProviderAdapter):
    name = Provider.OPENAI
    label = "OpenAI"
    default_model = OPENAI_MODEL

    def __init__(self, settings: Settings, client_factory: Optional[Callable[..., Any]] = None):
        super().__init__(settings)
        self._client_factory = client_factory or OpenAI

    def send(self, api_key: str, model: str, text: str) -> Any:
        options: Dict[str, Any] = {"api_key": api_key}
        if self._settings.request_timeout is not None:
            options["timeout"] = self._settings.request_timeout
        try:
            with self._client_factory(**options) as client:
                return client.chat.completions.create(
                    model=model,
                    messages=[
                        {"role": "system", "content": LOGOS_SYSTEM_PROMPT},
                        {"role": "user", "content": text},
                    ],
                    response_format={"type": "json_object"},
                )
        except APIStatusError as e:
            raise TransportError(f"OpenAI API error: {e.message or e.status_code}") from e
        except APIError as e:
            raise TransportError(f"OpenAI API error: {e.message}") from e

    def extract_text(self, payload: Any) -> Optional[str]:
        choices = getattr(payload, "choices", None) or []
        if not choices:
            return None
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        return content if isinstance(content, str) else None


class GeminiAdapter(HTTPProviderAdapter):
    name = Provider.GEMINI
    label = "Gemini"
    default_model = GEMINI_MODEL

    def send(self, api_key: str, model: str, text: str) -> Any:
        return self.post(
            GEMINI_URL.format(model=model),
            headers={"Content-Type": "application/json", "x-goog-api-key": api_key},
            json={
                "contents": [
                    {
                        "role": "user",
                        "parts": [{"text": LOGOS_SYSTEM_PROMPT}, {"text": text}],
                    }
                ],
                "generationConfig": {"temperature": 0.2},
            },
        )

    def extract_text(self, payload: Any) -> Optional[str]:
        candidate = _as_dict(_first(_as_dict(payload).get("candidates")))
        part = _as_dict(_first(_as_dict(candidate.get("content")).get("parts")))
        content = part.get("text")
        return content if isinstance(content, str) else None


class OpenRouterAdapter(HTTPProviderAdapter):
    name = Provider.OPENROUTER
    label = "OpenRouter"
    default_model = DEFAULT_OPENROUTER_MODEL

    def resolve_model(self, variant: Optional[str] = None) -> str:
        if variant and variant.strip():
            return variant.strip()
        return self.default_model

    def send(self, api_key: str, model: str, text: str) -> Any:
        return self.post(
            OPENROUTER_URL,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
                "X-Title": "Logos Argument Analyzer",
            },
            json={
                "model": model,
                "messages": [
                    {"role": "system", "content": LOGOS_SYSTEM_PROMPT},
                    {"role": "user", "content": text},
                ],
            },
        )

    def extract_text(self, payload: Any) -> Optional[str]:
        return _chat_completion_text(payload)


def build_adapters(
    settings: Settings,
    http: Any = None,
    openai_client_factory: Optional[Callable[..., Any]] = None,
) -> Dict[Provider, ProviderAdapter]:
    return {
        Provider.OPENAI: OpenAIAdapter(settings, client_factory=openai_client_factory),
        Provider.GEMINI: GeminiAdapter(settings, http=http),
        Provider.OPENROUTER: OpenRouterAdapter(settings, http=http),
    }
