"""Command-line access to a Pixela account."""
