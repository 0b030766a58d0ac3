"""Batch strategies for the auto translation plugin."""
