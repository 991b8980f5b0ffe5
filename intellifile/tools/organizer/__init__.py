"""PDF page reordering and deletion exposed through the IntelliFile tools namespace."""
