"""Infrastructure: source discovery and the workspace container."""
