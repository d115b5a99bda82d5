from .http_response import api_response
from .logger import get_logger
from .validators import is_valid_uuid

__all__ = ["api_response", "get_logger", "is_valid_uuid"]
