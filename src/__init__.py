"""Client for the ethical AI audit backend."""
