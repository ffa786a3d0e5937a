"""Look up a New Relic application GUID for use in GitHub Actions workflows."""

__version__ = "0.1.0"
