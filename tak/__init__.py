"""
Tak のルールエンジン
"""

__version__ = "1.0.0"
