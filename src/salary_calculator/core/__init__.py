"""Core domain: models, reference rates and the conversion engine."""
