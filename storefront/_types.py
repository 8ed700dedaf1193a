"""
Core types for storefront.

Re-exports from kungfu + custom type aliases.
"""

from __future__ import annotations

from kungfu import Result, Ok, Error, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Lazy Computation Aliases
# ═══════════════════════════════════════════════════════════════════════════════

type Lazy[T, E] = LazyCoroResult[T, E]
"""Lazy async computation that may fail."""

# ═══════════════════════════════════════════════════════════════════════════════
# Identity
# ═══════════════════════════════════════════════════════════════════════════════

type ProductId = str
"""Opaque product identifier, stable for a session (Airtable record id)."""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    "Lazy",
    "ProductId",
)
