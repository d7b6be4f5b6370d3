"""
Vaccination HTTP API
"""
