"""Configuration: settings, logging and fixed vocabularies."""
