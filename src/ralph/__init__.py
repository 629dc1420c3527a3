"""Ralph - scaffold projects for autonomous development loops."""

__version__ = "1.0.0"
