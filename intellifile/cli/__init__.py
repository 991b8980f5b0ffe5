"""Command line interface for IntelliFile."""
