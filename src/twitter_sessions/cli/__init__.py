"""Command line interface for twitter-sessions."""
