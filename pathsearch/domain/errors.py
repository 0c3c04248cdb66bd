"""Exceptions raised by graph construction and route searches."""


class GraphError(ValueError):
    """A graph or terrain was built in violation of its contract."""


class AmbiguousGraphError(GraphError):
    """A node label was added twice."""


class MissingNodeError(GraphError):
    """A mutation referenced a node that is not in the graph."""


class GraphFormatError(ValueError):
    """Graph or terrain text could not be parsed."""


class UnresolvedEndpointError(LookupError):
    """A route start or target could not be resolved to a node."""
