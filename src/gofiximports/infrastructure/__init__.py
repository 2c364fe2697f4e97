"""
Infrastructure Layer

External dependency implementations

Structure:
- golang: Go scanner, import parser, import rewriting, printer
- storage: Source file writer (permission-preserving)
- logging: structlog configuration
- config: Environment-based diagnostics settings
"""
