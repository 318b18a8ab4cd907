"""Runtime services (logging and tracing) used across the engine."""
