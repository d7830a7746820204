"""Infrastructure layer — import machinery for CLI targets."""
