from .number_ruler_widget import NumberRulerWidget, bind_scrollbar

__all__ = ['NumberRulerWidget', 'bind_scrollbar']
