"""API components for the shul zmanim board.

The REST surface lives in ``shulzmanim.api.rest`` and is imported from
there directly; it depends on the board, which depends on this package.
"""

from .hebcal import HebcalClient

__all__ = [
    "HebcalClient",
]
