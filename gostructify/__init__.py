"""
gostructify - generate Go struct definitions from database tables.

Given a database connection and a table name, gostructify reads the table's
columns from the information schema, maps each database type to a Go type,
and renders a self-contained struct with optional struct tags and methods.
"""

__version__ = "0.1.0"
