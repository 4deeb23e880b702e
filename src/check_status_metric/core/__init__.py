"""Core domain: models, config and the mutator itself."""
