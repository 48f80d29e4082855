"""
Core services shared by the site components
"""
from .api_client import ApiClient, ApiError
from .monitoring import ApiMonitor
from .pagination import Paginator
from .staging import ImageStaging, StagingError
from .validation import ValidationError

__all__ = [
    'ApiClient',
    'ApiError',
    'ApiMonitor',
    'Paginator',
    'ImageStaging',
    'StagingError',
    'ValidationError',
]
