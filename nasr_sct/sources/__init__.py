"""
Data sources for the nasr_sct library.
"""

from .cached import CachedSource
from .nasr import NasrSubscriptionSource

__all__ = [
    'CachedSource',
    'NasrSubscriptionSource',
]
