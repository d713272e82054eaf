"""Deployment environments recognised by Settings."""

from enum import Enum


class Environment(str, Enum):
    """Where the service runs; selects log rendering and debug defaults."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
