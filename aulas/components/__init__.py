"""Course exercise components (functional core)."""
