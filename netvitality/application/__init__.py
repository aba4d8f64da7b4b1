"""
Application Package

Use-case ports and the services that orchestrate the domain pipeline.
"""
