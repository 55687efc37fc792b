"""
models/ - Domain Models
========================
Plain dataclasses shared by every layer. No database or HTTP code here.
"""
