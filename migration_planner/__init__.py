"""Migration Planner: time estimates for VM migration stages."""

__version__ = "1.0.0"
