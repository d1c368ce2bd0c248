"""
测试fixtures包
"""
from .sample_data import (
    SAMPLE_BOOKS,
    SAMPLE_VCARD,
)

__all__ = [
    "SAMPLE_BOOKS",
    "SAMPLE_VCARD",
]
