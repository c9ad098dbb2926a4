"""Pydantic models for the overtime engine."""
