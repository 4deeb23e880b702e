"""Adapters connecting the core to hosts and template engines."""
