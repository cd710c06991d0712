"""Lesson Service FastAPI application."""
