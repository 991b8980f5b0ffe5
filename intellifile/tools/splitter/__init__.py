"""PDF splitting exposed through the IntelliFile tools namespace."""
