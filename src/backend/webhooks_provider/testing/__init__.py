"""Testing utilities for the webhooks integration resource.

Usage:
    from webhooks_provider.testing import InMemoryIntegrationClient

    client = InMemoryIntegrationClient()
    context = create_provider_context(client=client)
"""

__all__ = ["ClientCall", "InMemoryIntegrationClient", "hooks"]


def __getattr__(name: str):
    """Lazy import so the provider never loads test helpers unless asked."""
    if name in __all__:
        from . import memory_client

        return getattr(memory_client, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
