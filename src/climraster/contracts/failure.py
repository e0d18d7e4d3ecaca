"""Error taxonomy for the climatology raster pipeline.

Every stage failure is terminal. All errors share one base class so that
callers can handle a failed raster preparation uniformly.
"""


class ContractViolation(RuntimeError):
    """Raised when a pipeline stage contract is violated.

    Key distinction:
    - ValidationError: config error (handled by Pydantic)
    - ContractViolation: the grid cannot be turned into a raster
    """
    pass


class NotAClimatologyError(ContractViolation):
    """Input grid carries no climatology marker.

    The caller must run the climatology aggregation first.
    """
    pass


class MalformedGridError(ContractViolation):
    """Grid dimensions cannot be normalized to a single panel axis."""
    pass


class EmptyPanelAxisError(ContractViolation):
    """There are zero panels to render."""
    pass


class InvalidGeometryError(ContractViolation):
    """Grid spacing is zero or not finite."""
    pass


class UnknownBackdropThemeError(ContractViolation, ValueError):
    """Requested backdrop theme is not one of the recognized themes."""
    pass
