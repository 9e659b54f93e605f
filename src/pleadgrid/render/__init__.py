"""Document-level inputs to the rendering backend (caption and request)."""
