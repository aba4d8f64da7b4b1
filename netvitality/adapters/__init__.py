"""
Adapters Package

Inbound adapters that connect transports to the vitality use case.
"""
