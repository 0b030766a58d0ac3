"""Pipeline services for the auto translation plugin."""
