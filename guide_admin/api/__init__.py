"""Main application entry point."""
