"""Commons package - settings and telemetry shared across layers."""
