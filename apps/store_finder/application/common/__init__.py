"""Application common."""
