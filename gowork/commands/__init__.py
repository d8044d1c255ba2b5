"""Click commands for the gowork CLI."""
