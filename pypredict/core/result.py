"""
Generic result container for PyPredict computations.

The Result class provides a standardized envelope around a domain-specific
parameter payload. This enables shared tooling for timing, diagnostics and
reporting while allowing each domain to define its own payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (alpha, df, critical value)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for prediction computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (predictions, estimates, etc.)
        info: Structured metadata (method, alpha, degrees of freedom)
        timing: Execution timing breakdown, or None if not measured
        method: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=PredictionParams(predictions=(...,)),
        ...     info={'alpha': 0.05, 'df': 8},
        ...     timing={'total_seconds': 0.001},
        ...     method='observations',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    method: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
