"""
OGC (Open Geospatial Consortium) specific implementations.

This module contains the WMS GetMap URL factory and its helpers.
"""

from .wms import WmsGetMapUrlFactory, contains_ignore_case, format_bbox, query_delimiter

__all__ = [
    "WmsGetMapUrlFactory",
    "contains_ignore_case",
    "format_bbox",
    "query_delimiter",
]
