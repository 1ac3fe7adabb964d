"""Unit tests. Filesystem access, where needed, stays inside ``tmp_path``."""
