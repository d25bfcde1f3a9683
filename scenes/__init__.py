"""scenes — the pygame screen driven by ``core.app.App``."""
