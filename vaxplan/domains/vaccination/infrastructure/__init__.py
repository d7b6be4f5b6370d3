"""
Vaccination Infrastructure Layer
"""
