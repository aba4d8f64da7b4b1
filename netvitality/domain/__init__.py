"""
Domain Package

Pure graph models and analysis services.
"""
