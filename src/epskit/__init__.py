"""
epskit — tolerance-сравнения float и dispatch-хелперы.

- epskit.core.math: масштабируемый допуск, сравнения, диапазоны, степени двойки
- epskit.dispatch: выполнение задач в главном / фоновом контексте
"""

__version__ = "0.1.0"
