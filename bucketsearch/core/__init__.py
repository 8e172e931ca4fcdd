"""
Core package for the bucket search engine: state model, logging and errors.
"""
