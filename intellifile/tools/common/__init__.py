"""Shared building blocks for IntelliFile tools."""
