"""
Persistence adapters.

Repositories encapsulate how Cliente/Endereco rows are stored and retrieved.
Services depend on these classes rather than opening sessions themselves.
"""

from .sql_repository import ClienteRepository, EnderecoRepository, SQLRepository

__all__ = ["ClienteRepository", "EnderecoRepository", "SQLRepository"]
