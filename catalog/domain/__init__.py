"""Pure business rules (no I/O) for catalog records."""
