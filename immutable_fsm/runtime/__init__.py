"""Runtime support for invoking state hooks."""
