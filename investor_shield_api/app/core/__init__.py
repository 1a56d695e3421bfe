"""Configuration, logging, security and storage primitives."""
