"""
Domain Layer

Go source model, rewrite rules, prefix matching and errors
"""
