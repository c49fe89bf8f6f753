"""CLI module for icalarm."""
