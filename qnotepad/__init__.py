"""QNotepad: a minimal PyQt6 plain-text editor."""
