"""Asset store, presentation adapter and shared helpers."""
