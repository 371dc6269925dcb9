"""Browser launcher dispatch: resolves ``*browser`` specifiers to launchers."""
