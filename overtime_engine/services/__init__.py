"""Pure overtime and pay calculation services."""
