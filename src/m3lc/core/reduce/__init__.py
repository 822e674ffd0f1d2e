"""Normal-order beta reduction: single steps and iteration to normal form."""

from .beta import IrreducibleTermError, is_irreducible, step
from .normalize import reduce, reduction_chain

__all__ = [
    "IrreducibleTermError",
    "is_irreducible",
    "reduce",
    "reduction_chain",
    "step",
]
