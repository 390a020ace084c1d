class AnalysisError(RuntimeError):
    """Base class for every failure surfaced to the caller of analyze()."""

    status_code = 502

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(AnalysisError):
    """A provider credential is missing. Raised before any network call."""

    status_code = 500


class TransportError(AnalysisError):
    """Non-success HTTP status or network failure talking to a provider."""


class EmptyContentError(AnalysisError):
    pass


class ExtractionError(AnalysisError):
    pass


class ParseError(AnalysisError):
    pass


class SchemaError(AnalysisError):
    pass
