"""HTTP API for the charge-rate engine."""
