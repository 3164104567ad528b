"""Store Finder API."""
