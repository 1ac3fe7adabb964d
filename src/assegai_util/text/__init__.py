"""String helpers: case conversion, inflection and the `Text` value."""
