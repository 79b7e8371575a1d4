"""Machine-generated identifier space and index. Regenerate with `python main.py generate`."""
