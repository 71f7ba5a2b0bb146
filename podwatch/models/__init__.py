"""Data models for PodWatch TUI."""
