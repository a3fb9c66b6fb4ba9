"""
sqltypo: typo-aware identifier matching for query text.

Subpackages:
- matching: edit distance, candidate search, typo detection, detector cache
- settings: SQLTYPO_* configuration
"""

__version__ = "1.0.0"
