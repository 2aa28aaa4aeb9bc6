"""Captions Service."""
