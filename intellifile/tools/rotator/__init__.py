"""PDF page rotation exposed through the IntelliFile tools namespace."""
