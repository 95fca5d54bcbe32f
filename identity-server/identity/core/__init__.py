"""Configuration, hashing and process wiring."""
