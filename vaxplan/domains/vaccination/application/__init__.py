"""
Vaccination Application Layer

Use cases, ports and the pure pipeline entry points.
"""
