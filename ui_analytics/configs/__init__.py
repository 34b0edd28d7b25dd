"""Configuration for UI Analytics (environment + .env backed)."""
