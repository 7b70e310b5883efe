"""Adapters – bridges between request transports and the grid core."""
