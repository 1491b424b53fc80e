"""General-purpose helpers: conversions, JSON, macros, predicates, sampling, secrets and replayed shell sessions."""

__version__ = "0.1.0"