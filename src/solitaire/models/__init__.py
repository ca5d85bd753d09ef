"""Game state models, validation and serialization."""
