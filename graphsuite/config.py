"""Configuration classes for graphsuite components."""

from dataclasses import dataclass


@dataclass
class GraphConfig:
    """Tunables for graph storage and the exact solvers."""

    # Side length of a freshly created adjacency matrix
    matrix_initial_capacity: int = 8

    # Multiplier applied to the matrix side when it runs out of room
    matrix_growth_factor: int = 2

    # Exact TSP solvers log a warning above this many vertices
    exact_tsp_warn_vertices: int = 10

    def grown_capacity(self, current: int, required: int) -> int:
        """Return the next matrix side length that fits ``required`` vertices."""
        capacity = max(current, self.matrix_initial_capacity, 1)
        while capacity < required:
            capacity *= max(self.matrix_growth_factor, 2)
        return capacity


# Global configuration instance
GRAPH_CONFIG = GraphConfig()
