"""Configuration layer — TOML models, unified settings, and logging setup."""
