"""A minimal content-addressed version control tool: init, config, add and commit."""

__version__ = "0.1.0"