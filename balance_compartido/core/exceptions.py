"""Jerarquía de excepciones del dominio."""


class BalanceError(Exception):
    """Base de todos los errores del dominio."""


class ValidationError(BalanceError):
    """Datos de entrada inválidos o acción no permitida para el estado actual."""


class NotFoundError(BalanceError):
    """La entidad no existe o no pertenece al hogar."""
