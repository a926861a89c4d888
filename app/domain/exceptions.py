from __future__ import annotations


class DomainError(Exception):
    """Base para erros de dominio."""


class PoolNotFoundError(DomainError):
    """Pool solicitada nao existe no snapshot simulado."""


class AprManagerInputError(DomainError):
    """Parametros invalidos para o gerenciador de APR."""


class PoolSourceError(DomainError):
    """Nao foi possivel carregar a lista de pools da fonte configurada."""
