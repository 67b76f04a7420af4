class DomainError(ValueError):
    """Invalid model input in a domain sense (bad indices, bad field names, etc.)."""


class InvalidDimension(DomainError):
    """Variable or constraint count is not a positive integer."""


class UnsupportedDimension(DomainError):
    """Variable count not supported by the selected solving variant."""


class SolveError(RuntimeError):
    """The solve action finished without an optimal solution."""


class InfeasibleProblem(SolveError):
    pass


class UnboundedProblem(SolveError):
    pass


class BackendError(SolveError):
    """Remote solver service answered with success=false."""


class EngineUnreachable(SolveError):
    """Remote solver service could not be reached or answered garbage."""


class EngineError(SolveError):
    """Local engine ended in a state other than optimal/infeasible/unbounded."""
