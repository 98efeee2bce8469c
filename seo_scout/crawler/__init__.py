"""seo_scout.crawler: domain-restricted depth-first crawling."""
