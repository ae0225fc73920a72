"""Configuration model, validation and errors."""
