"""Command-line host for mu-logo."""
