"""Live box score category tracker."""

__version__ = "0.1.0"
