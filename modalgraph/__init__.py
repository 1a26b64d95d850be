"""Modal, keystroke-driven graph editor core with a branching undo history."""

__version__ = "0.1.0"
