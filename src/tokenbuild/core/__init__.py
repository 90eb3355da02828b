"""Core token loading, flattening and resolution."""
