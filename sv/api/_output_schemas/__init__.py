"""Output schemas for API commands - one module per domain."""
