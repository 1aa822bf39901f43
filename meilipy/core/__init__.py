"""Core building blocks of the meilipy client."""
