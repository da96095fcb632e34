"""Configuration classes for adtgraph components."""

from dataclasses import dataclass


@dataclass
class GraphConfig:
    """Runtime switches for `DiGraph` instances."""

    # Verify store invariants after every mutation (slow; meant for debugging)
    check_invariants: bool = False

    # Emit a DEBUG record for every vertex/edge mutation
    log_mutations: bool = False


# Global configuration instance
GRAPH_CONFIG = GraphConfig()
