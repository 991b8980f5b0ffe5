"""PDF compression exposed through the IntelliFile tools namespace."""
