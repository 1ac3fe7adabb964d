"""Entrypoints (inbound adapters) for assegai-util.

Expose the helpers to the outside world. Parse and validate inputs, read
environment defaults through `assegai_util.config`, call the library and
present results.
"""
