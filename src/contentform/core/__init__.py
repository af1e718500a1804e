"""Reconciliation core: contracts, coercion, mapping, engine and providers."""
