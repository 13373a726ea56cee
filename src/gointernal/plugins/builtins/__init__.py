"""Built-in import-site extractors."""
