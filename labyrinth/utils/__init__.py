"""Random sources, analysis, serialization and text rendering helpers."""
