"""Command implementations invoked by the gotter CLI."""
