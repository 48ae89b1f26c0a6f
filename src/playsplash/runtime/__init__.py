"""Process launching for the splash sequence."""
