"""Deploy a Git-based Heroku application from the command line."""

__version__ = "0.1.0"
