class TriangulationError(Exception):
    """Base class for inputs that cannot be triangulated."""


class DegenerateTripleError(TriangulationError, ValueError):
    """
    Three points do not admit a well defined circumcircle: they are
    coincident or collinear within the configured epsilon.
    """

    def __init__(self, message, indices=None):
        super().__init__(message)
        self.indices = indices


class CoincidentPointsError(DegenerateTripleError):
    """The input holds the same point more than once."""
