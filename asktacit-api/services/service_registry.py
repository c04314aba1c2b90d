"""
Centralized singleton management for AskTacit services
"""

from functools import lru_cache
from services.rfp_service import RfpService
from core.logger import get_logger

logger = get_logger(__name__)

@lru_cache(maxsize=1)
def get_rfp_service():
    """
    Create and cache a single instance of RfpService
    """
    logger.info("Creating new RfpService singleton instance")

    return RfpService()
