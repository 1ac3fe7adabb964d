"""The ``assegai-util`` command line."""
