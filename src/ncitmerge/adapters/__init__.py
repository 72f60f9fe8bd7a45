"""Adapters translating external file formats into the domain model."""
