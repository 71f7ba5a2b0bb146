"""PodWatch - live Kubernetes pod status tree for the terminal."""

__version__ = "0.1.0"
