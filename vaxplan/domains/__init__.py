"""
Bounded contexts of the vaccination planning service.
"""
