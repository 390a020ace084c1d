from typing import Dict, List, Optional

from logos.config import Settings
from logos.errors import AnalysisError
from logos.logger import get_logger
from logos.models import AnalysisRequest, AnalysisResult, Provider, ProviderInfo
from logos.services.normalizer import normalize
from logos.services.providers import OPENROUTER_MODELS, ProviderAdapter, ProviderReply, build_adapters

log = get_logger()


class Analyzer:
    """Routes an argument to one provider and normalizes whatever comes back.

    Holds no per-call state; one instance serves every request.
    """

    def __init__(self, settings: Settings, adapters: Optional[Dict[Provider, ProviderAdapter]] = None):
        self._settings = settings
        self._adapters = adapters if adapters is not None else build_adapters(settings)

    def dispatch(self, text: str, provider: Provider, sub_variant: Optional[str] = None) -> ProviderReply:
        if not text or not text.strip():
            raise ValueError("text must not be empty")
        adapter = self._adapters.get(Provider(provider))
        if adapter is None:
            raise ValueError(f"Unsupported AI model: {provider}")

        model = adapter.resolve_model(sub_variant)
        log.info("Dispatching %d chars to %s (model=%s)", len(text), adapter.label, model)
        return adapter.dispatch(text, sub_variant)

    def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        reply = self.dispatch(request.text, request.model, request.openRouterModel)
        try:
            result = normalize(reply)
        except AnalysisError as e:
            log.warning(
                "%s analysis failed (%s): %s", reply.provider, type(e).__name__, e.message
            )
            raise

        log.info(
            "%s analysis complete: %d premises (history key %s)",
            reply.provider,
            len(result.premises),
            request.history_label,
        )
        return result

    def describe_providers(self) -> List[ProviderInfo]:
        providers = []
        for name, adapter in self._adapters.items():
            _, api_key = self._settings.credential_for(name.value)
            is_variant_capable = name is Provider.OPENROUTER
            providers.append(
                ProviderInfo(
                    name=name,
                    configured=bool(api_key),
                    model=None if is_variant_capable else adapter.default_model,
                    variants=list(OPENROUTER_MODELS) if is_variant_capable else [],
                )
            )
        return providers
