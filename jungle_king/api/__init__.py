"""
Jungle King HTTP API
"""
