"""
Shared Kernel

Framework-free building blocks shared across the apps. Nothing in here
imports Django, so the rules can be exercised without a database.
"""
