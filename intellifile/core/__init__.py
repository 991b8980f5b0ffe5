"""Domain primitives shared by every IntelliFile tool."""
