"""Conversions between PDF documents and raster images."""
