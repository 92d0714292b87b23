"""Configuration, logging, database and error handling infrastructure."""
