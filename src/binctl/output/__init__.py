"""Output layer — Rich console, renderers, and result formatting."""
