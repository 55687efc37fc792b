"""
utils/ - Shared Helpers
========================
"""
