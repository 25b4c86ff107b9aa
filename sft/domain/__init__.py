"""Domain models and types for sft.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from storage and rendering
"""

from sft.domain.models import Amount, CategoryName, IsoDate, TransactionId

__all__ = ["Amount", "CategoryName", "IsoDate", "TransactionId"]
