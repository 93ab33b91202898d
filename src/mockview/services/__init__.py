"""Clients for the external document store and evaluation model."""
