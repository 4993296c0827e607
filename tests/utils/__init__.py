"""Shared test utilities for weightgraph."""

from .graphs import (
    TINY_EWD,
    TINY_EWDN,
    TINY_EWDNC,
    TINY_EWG,
    dags,
    digraphs,
    tiny_ewd,
    tiny_ewdn,
    tiny_ewdnc,
    tiny_ewg,
    weighted_graphs,
)

__all__ = [
    "TINY_EWG",
    "TINY_EWD",
    "TINY_EWDN",
    "TINY_EWDNC",
    "tiny_ewg",
    "tiny_ewd",
    "tiny_ewdn",
    "tiny_ewdnc",
    "weighted_graphs",
    "digraphs",
    "dags",
]
