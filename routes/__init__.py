"""
Command Bridge Routes
"""
