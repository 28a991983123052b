"""Access to the GitHub REST API."""
