"""Graph adapters for path finding."""

from subway_network.adapters.graph.networkx_path_finder import NetworkxPathFinder

__all__ = ["NetworkxPathFinder"]
