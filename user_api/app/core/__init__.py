"""Configuration, logging, database and error helpers."""
