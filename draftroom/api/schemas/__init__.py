"""Pydantic schemas for the draftroom API."""
