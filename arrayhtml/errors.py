"""Exceptions raised while rendering element trees."""


class ValidationError(ValueError):
    """An element has the right shape but breaks a structural rule."""


__all__ = ["ValidationError"]
