"""
Padrões GoF implementados como demonstrações independentes
"""

from .adapter import *
from .chain_of_responsibility import *
from .decorator import *
from .observer import *
from .strategy import *
from .template_method import *
from .business_object import *

__all__ = [
    # Adapter Pattern
    'Livro',
    'LivroImpresso',
    'Kindle',
    'KindleAdapter',
    'Audiolivro',
    'AudiolivroAdapter',
    'Pessoa',

    # Chain of Responsibility Pattern
    'VerificacaoFalhou',
    'StatusCasa',
    'VerificadorCasa',
    'Trancas',
    'Luzes',
    'Alarme',
    'montar_cadeia',

    # Decorator Pattern
    'DesignSite',
    'DesignBasico',
    'DesignDecorator',
    'DesignPersonalizado',
    'SEO',
    'ServicoAdicional',
    'aplicar_servicos',

    # Observer Pattern
    'Observer',
    'Subject',
    'Login',
    'LoginHandler',
    'EmailHandler',
    'RelatorioHandler',
    'ObserverInvalido',
    'ObserverNaoEncontrado',

    # Strategy Pattern
    'Logger',
    'LogParaArquivo',
    'LogParaBancoDeDados',
    'LogParaWebService',
    'App',
    'StrategySelector',

    # Template Method Pattern
    'Jogo',
    'Mario',
    'Tankfight',
    'criar_jogo',

    # Business Object Pattern
    'DemonstracaoBO',
]
