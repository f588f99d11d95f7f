"""
Persistence adapters.

Services depend on SQLRepository rather than on sessions or statements.
"""
