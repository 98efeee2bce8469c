"""seo_scout.parser: HTML parsing helpers."""
