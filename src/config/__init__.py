"""Runtime configuration (environment-driven constants)."""
