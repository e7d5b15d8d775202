"""Headless table services: schema, identity, comparison, sorting, events."""
