"""Qt widgets rendering table controllers."""
