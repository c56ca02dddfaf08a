"""
Services Layer - Facades used by application code.
"""
