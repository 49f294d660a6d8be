"""Name -> constructor registry for the RMQ structures."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List

from rmq_structures.algs import FischerHeunRMQ, HybridRMQ, PrecomputedRMQ, SparseTableRMQ
from rmq_structures.algs.base import RMQ

RMQFactory = Callable[..., RMQ]

RMQ_FACTORIES: Dict[str, RMQFactory] = {
    "precomputed": PrecomputedRMQ,
    "sparse_table": SparseTableRMQ,
    "hybrid": HybridRMQ,
    "fischer_heun": FischerHeunRMQ,
}

# Spellings accepted on top of the canonical names, after normalisation.
_ALIASES: Dict[str, str] = {
    "precomputedrmq": "precomputed",
    "sparsetable": "sparse_table",
    "sparsetablermq": "sparse_table",
    "hybridrmq": "hybrid",
    "fischerheun": "fischer_heun",
    "fischerheunrmq": "fischer_heun",
}

__all__ = ["RMQ_FACTORIES", "available_structures", "resolve_name", "create_rmq"]


def available_structures() -> List[str]:
    return list(RMQ_FACTORIES)


def resolve_name(name: str) -> str:
    """Map a user-supplied structure name onto its canonical registry key.

    Accepts the canonical keys, the class names (``FischerHeunRMQ``) and the
    dotted ``package.ClassName`` form (``rmq.FischerHeunRMQ``).
    """
    key = name.strip().rsplit(".", 1)[-1].lower().replace("-", "_")
    if key in RMQ_FACTORIES:
        return key
    squashed = key.replace("_", "")
    if squashed in _ALIASES:
        return _ALIASES[squashed]
    raise ValueError(
        f"Unknown RMQ structure {name!r}; available: {', '.join(available_structures())}"
    )


def create_rmq(name: str, elements: Iterable[float], **kwargs) -> RMQ:
    """Build the structure registered under ``name`` over ``elements``."""
    return RMQ_FACTORIES[resolve_name(name)](elements, **kwargs)
