from .number import NumberRulerRenderer

__all__ = ['NumberRulerRenderer']
