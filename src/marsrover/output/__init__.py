"""Output layer — console I/O and report rendering."""
