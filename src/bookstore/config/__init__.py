"""Settings models, config discovery, and logging setup."""
