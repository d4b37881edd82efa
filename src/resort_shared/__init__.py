"""
Shared domain code for the resort POS backend: configuration, logging,
store clients, record schemas and services.
"""
