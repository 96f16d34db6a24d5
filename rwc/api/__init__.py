"""API layer for rwc - counting engine, configuration and rendering."""
