"""
Inbound Adapters Package
"""
