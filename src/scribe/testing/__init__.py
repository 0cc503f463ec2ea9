"""Testing helpers for code that logs through scribe."""
