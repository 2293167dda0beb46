"""Command-line interface for easekit."""
