"""Translation providers for the auto translation plugin."""
