"""
services/ - Business Logic Layer
=================================
Services sit between handlers and repositories and turn "no row"
results into domain errors.
"""
