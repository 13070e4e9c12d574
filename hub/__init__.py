"""
Backend package for the gaming hub API.

This package provides a FastAPI application over a storage layer that runs
either in memory (demo mode) or against a relational database.
"""
