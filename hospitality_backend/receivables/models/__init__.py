"""
PATH: receivables/models/__init__.py

Receivables models export surface.
"""

from .invoice import ARInvoice
from .application import ARInvoiceApplication

__all__ = [
    "ARInvoice",
    "ARInvoiceApplication",
]
