"""Service layer — registry state and the command facade, returning ServiceResult.

Services may import from domain and plugins.
They must never import from commands or output.
"""
