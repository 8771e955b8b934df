"""
FastAPI service exposing recommendation, movie detail and trending endpoints.
"""
