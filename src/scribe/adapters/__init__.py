"""Adapters – storage and HTTP collaborators used by the bundled plugins."""
