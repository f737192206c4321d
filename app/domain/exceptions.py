from __future__ import annotations


class DomainError(Exception):
    """Base class for domain errors."""


class UpstreamFetchError(DomainError):
    """Market data could not be fetched from the upstream provider."""


class PairNotFoundError(DomainError):
    """No trading pair exists for the requested pool address."""


class SwapSimulationInputError(DomainError):
    """Invalid parameters for a swap simulation."""
