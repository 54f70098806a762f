class GraphInputError(ValueError):
    """Base class for malformed graph input."""


class InvalidVertexId(GraphInputError):
    """A vertex id that is not a positive integer."""


class InvalidVertexReference(GraphInputError):
    """An edge endpoint or queried vertex that is not in the vertex set."""


class SelfLoopError(GraphInputError):
    """An edge whose endpoints are the same vertex."""
