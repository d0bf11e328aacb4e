"""Config – secret value types, store port and 12-factor settings."""
