"""Thin wrappers over pypdf and Pillow used by the transformation tools."""
