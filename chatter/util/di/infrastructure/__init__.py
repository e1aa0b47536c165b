"""Infrastructure providers: mockable components with a production default.

Importing the production subclasses here registers them with their
component base.
"""

from .broadcast import BroadcastProvider, ProdBroadcastProvider
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "BroadcastProvider",
    "PersistenceProvider",
    "ProdBroadcastProvider",
    "ProdPersistenceProvider",
]
