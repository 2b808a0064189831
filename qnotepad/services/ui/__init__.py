"""Qt user interface: main window, UI ports and their Qt adapters."""
