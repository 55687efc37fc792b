"""
repositories/ - Data Access Layer
==================================
Each repository owns the SQL for one table and is handed the Database
it runs against. Repositories return domain model objects, or None/False
when no row matched; they never decide what that means for the caller.
"""
