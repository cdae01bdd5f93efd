"""Advisory procurement core: roles, route guards, approval chain and proposal versions."""

__version__ = "1.0.0"
