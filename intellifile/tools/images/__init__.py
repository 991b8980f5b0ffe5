"""Raster image compression and format conversion."""
