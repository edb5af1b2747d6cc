"""Provider error types."""


class ProviderError(RuntimeError):
    """The provider could not produce a response (network, auth, rate limit, bad payload)."""
