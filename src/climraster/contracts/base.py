"""Base contract enforcement utilities.

The require() function is the single enforcement mechanism for all contracts.
"""

from typing import Type

from climraster.contracts.failure import ContractViolation


def require(
    condition: bool,
    message: str,
    error: Type[ContractViolation] = ContractViolation,
) -> None:
    """Enforce a pipeline contract.

    Called at stage boundaries to verify the preceding stage produced the
    guaranteed invariants. It is fail-fast: no recovery, no fallback.

    Parameters
    ----------
    condition : bool
        The invariant that must be true.

    message : str
        Error message explaining the contract violation.

    error : type, optional
        ContractViolation subclass to raise. Defaults to ContractViolation.

    Raises
    ------
    ContractViolation
        If condition is False (or the requested subclass).

    Examples
    --------
    >>> require(grid.climatology_marker is not None,
    ...         "Input grid is not a climatology", NotAClimatologyError)
    >>> require(n_panels > 0, "No panels to render", EmptyPanelAxisError)
    """
    if not condition:
        raise error(message)
