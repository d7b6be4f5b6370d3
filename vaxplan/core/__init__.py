"""
Core architecture components shared by all VaxPlan domains.
"""
