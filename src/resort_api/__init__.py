"""
HTTP API for the resort POS backend.
"""
