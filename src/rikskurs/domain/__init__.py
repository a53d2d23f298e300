"""Domain types for rate and bank-day resolution.

Everything here is transient: values are built from a single provider response
and discarded once the caller has rendered its answer.
"""

__all__ = [
    "currency",
    "errors",
    "observations",
]
