"""
Food Order API - product catalog and order lifecycle over HTTP
"""
__version__ = "1.0.0"
