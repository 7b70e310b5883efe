"""Kernel – error hierarchy and predicate primitives (framework-agnostic)."""
