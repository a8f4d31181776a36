"""Ticket purchase validation and pricing."""
