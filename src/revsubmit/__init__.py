"""Submit numbered revision branches to a Gerrit-style review server."""
