"""Contracts (protocols) for domain components implemented by adapters."""

from subway_network.domain.contracts.path_finder import PathFinderProtocol

__all__ = ["PathFinderProtocol"]
