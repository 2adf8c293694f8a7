"""Adapters layer - configuration, persistence and graph implementations."""
