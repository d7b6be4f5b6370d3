"""
Vaccination Planning Domain
"""
