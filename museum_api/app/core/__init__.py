"""Configuration, database access, security helpers and errors."""
