"""
Utility modules: console/logging setup and CST rendering helpers.
"""
