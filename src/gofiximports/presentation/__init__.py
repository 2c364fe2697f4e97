"""
Presentation Layer

Command-line interface
"""
