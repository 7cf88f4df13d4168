"""Output layer — citation lines, Rich renderers, and JSON formatting."""
