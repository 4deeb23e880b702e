"""Event wire encodings."""
