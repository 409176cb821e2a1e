"""Configuration, logging and error handling for the application."""
