"""Configuration, logging and storage primitives shared by the API."""
