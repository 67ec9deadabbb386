"""Configuration — TOML discovery, Pydantic Settings, and structlog setup."""
