"""Shared helpers: charset table, length sampling, errors, request models."""
