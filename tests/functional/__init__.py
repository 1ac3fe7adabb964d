"""Functional tests: multi-step workflows over the public API and CLI help."""
