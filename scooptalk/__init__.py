"""Scooptalk: retrieval-augmented voice assistant backend for an ice cream shop."""
