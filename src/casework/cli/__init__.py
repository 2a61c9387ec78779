"""Command-line interface for casework."""
