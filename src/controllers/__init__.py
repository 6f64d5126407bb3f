"""
Controllers do padrão MVC para as demonstrações
"""

from .demonstracao_controller import DemonstracaoController

__all__ = [
    'DemonstracaoController'
]
