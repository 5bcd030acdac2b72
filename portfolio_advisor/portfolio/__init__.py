"""Portfolio recommendation domain package."""
