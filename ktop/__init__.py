"""ktop - terminal dashboard for live Kubernetes resource usage."""

__version__ = "0.1.0"
