"""decoder-ring API: mode registry, transforms and commands."""
