"""
CLI Presentation Layer
"""
