"""PDF merging exposed through the IntelliFile tools namespace."""
