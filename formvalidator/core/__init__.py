"""Core validation engine: models, validators and rules."""
