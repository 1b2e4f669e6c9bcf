class MinCutError(ValueError):
    """Base class for failures that abort a minimum cut computation."""


class InvalidEdge(MinCutError):
    """Self-loop or negative weight edge."""


class UnknownVertex(MinCutError):
    """Vertex handle that is not (or no longer) live in the graph."""


class InsufficientVertices(MinCutError):
    """Fewer than 2 live vertices, so no cut exists."""


class DisconnectedGraph(MinCutError):
    """A phase could not reach every live vertex from its start vertex."""
