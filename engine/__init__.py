"""Guard report assembly and runtime settings."""
