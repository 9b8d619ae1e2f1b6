"""GitHub REST API client and response types."""
